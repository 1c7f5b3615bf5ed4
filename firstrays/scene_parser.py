"""
Scene description parser.

Supports a YAML or JSON scene description with:
- Camera configuration
- The sphere to trace against
- Render settings

Example scene file:
```yaml
camera:
  position: [-10, 0, 0]
  direction: [10, 0, 0]
  height: [0, 1, 0]

sphere:
  position: [10, 0, 0]
  radius: 1

render:
  width: 255
  height: 255
  scale: 255
```

Any section left out falls back to the default scene above.
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Any, Optional, Tuple
import json

import yaml

from .vec3 import Vec3
from .camera import Camera
from .shapes import Sphere
from .renderer import RenderSettings

DEFAULT_SCENE: Dict[str, Any] = {
    'camera': {
        'position': [-10.0, 0.0, 0.0],
        'direction': [10.0, 0.0, 0.0],
        'height': [0.0, 1.0, 0.0],
    },
    'sphere': {
        'position': [10.0, 0.0, 0.0],
        'radius': 1.0,
    },
    'render': {
        'width': 255,
        'height': 255,
        'scale': 255,
    },
}


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.sphere: Optional[Sphere] = None
        self.camera: Optional[Camera] = None
        self.settings: Optional[RenderSettings] = None

    def parse_file(self, filepath: str) -> Tuple[Sphere, Camera, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (sphere, camera, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        try:
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                # YAML is a superset of JSON, so anything else goes through it
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        if data is None:
            data = {}
        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[Sphere, Camera, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (sphere, camera, settings)
        """
        if not isinstance(data, dict):
            raise SceneParseError(f"Scene must be a mapping, got: {type(data).__name__}")

        unknown = set(data) - set(DEFAULT_SCENE)
        if unknown:
            raise SceneParseError(f"Unknown scene sections: {', '.join(sorted(unknown))}")

        # Settings first: the camera normalises pixel coordinates by image size
        self._parse_settings(self._section(data, 'render'))
        self._parse_sphere(self._section(data, 'sphere'))
        self._parse_camera(self._section(data, 'camera'))

        return self.sphere, self.camera, self.settings

    def _section(self, data: Dict[str, Any], name: str) -> Dict[str, Any]:
        section = data.get(name)
        if section is None:
            return DEFAULT_SCENE[name]
        if not isinstance(section, dict):
            raise SceneParseError(f"Section '{name}' must be a mapping")
        return section

    def _parse_vec3(self, data: Any) -> Vec3:
        """Parse a Vec3 from various formats."""
        try:
            if isinstance(data, (list, tuple)):
                if len(data) != 3:
                    raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
                return Vec3(float(data[0]), float(data[1]), float(data[2]))
            elif isinstance(data, dict):
                return Vec3(
                    float(data.get('x', 0)),
                    float(data.get('y', 0)),
                    float(data.get('z', 0))
                )
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}") from e
        raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_number(self, data: Any, name: str, kind=float):
        try:
            return kind(data)
        except (TypeError, ValueError, OverflowError) as e:
            raise SceneParseError(f"Invalid value for '{name}': {data}") from e

    def _parse_sphere(self, sphere_data: Dict[str, Any]) -> None:
        """Parse sphere section."""
        defaults = DEFAULT_SCENE['sphere']
        self.sphere = Sphere(
            radius=self._parse_number(sphere_data.get('radius', defaults['radius']), 'radius'),
            position=self._parse_vec3(sphere_data.get('position', defaults['position']))
        )

    def _parse_camera(self, camera_data: Dict[str, Any]) -> None:
        """Parse camera section."""
        defaults = DEFAULT_SCENE['camera']
        self.camera = Camera(
            position=self._parse_vec3(camera_data.get('position', defaults['position'])),
            direction=self._parse_vec3(camera_data.get('direction', defaults['direction'])),
            height=self._parse_vec3(camera_data.get('height', defaults['height'])),
            image_width=self.settings.width,
            image_height=self.settings.height
        )

    def _parse_settings(self, settings_data: Dict[str, Any]) -> None:
        """Parse render settings section."""
        defaults = DEFAULT_SCENE['render']
        settings = RenderSettings(
            width=self._parse_number(settings_data.get('width', defaults['width']), 'width', int),
            height=self._parse_number(settings_data.get('height', defaults['height']), 'height', int),
            scale=self._parse_number(settings_data.get('scale', defaults['scale']), 'scale', int)
        )
        if settings.width <= 0 or settings.height <= 0:
            raise SceneParseError(
                f"Image size must be positive, got {settings.width}x{settings.height}"
            )
        if not 0 < settings.scale <= 255:
            raise SceneParseError(f"Scale must be between 1 and 255, got {settings.scale}")
        self.settings = settings


def load_scene(filepath: str) -> Tuple[Sphere, Camera, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (sphere, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[Sphere, Camera, RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (sphere, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)


def default_scene() -> Tuple[Sphere, Camera, RenderSettings]:
    """The built-in scene: a unit sphere 20 units in front of the camera."""
    return parse_scene({})
