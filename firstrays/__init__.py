"""
firstrays - first rays of a Python ray tracer

Traces one ray per pixel against a single sphere:
- Single-precision vector math
- Ray/sphere intersection by the quadratic formula
- Pinhole camera with a derived horizontal basis vector
- Distance shading with a gradient background
- PPM, Pillow and live matplotlib output
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Point3
from .ray import Ray
from .shapes import Sphere
from .camera import Camera
from .renderer import Renderer, RenderSettings, saturate_u8
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene, default_scene
