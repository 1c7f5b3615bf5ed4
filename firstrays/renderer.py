"""
Renderer module - turns ray/sphere distances into pixels.

Implements:
- Per-pixel colouring (distance shading with a gradient fallback)
- Full-image rendering into an RGBA numpy buffer
- Plain (P3) and raw (P6) PPM output
- Pillow-backed image file output
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import BinaryIO, Callable, Tuple
import numpy as np

from .camera import Camera
from .shapes import Sphere

RGBA = Tuple[int, int, int, int]
PixelColor = Callable[[int, int], RGBA]


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 255
    height: int = 255
    scale: int = 255  # maximum channel value


def saturate_u8(value: float) -> int:
    """Cast a float to an 8-bit channel: NaN maps to 0, out of range clamps."""
    if math.isnan(value):
        return 0
    if value <= 0:
        return 0
    if value >= 255:
        return 255
    return int(value)


class Renderer:
    """Distance-shading renderer for a single sphere."""

    # Distance subtracted before scaling, so the visible band starts near
    # the sphere's front surface in the default scene.
    DISTANCE_OFFSET = np.float32(1.9)
    DISTANCE_GAIN = np.float32(1000.0)

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()

    def gradient_color(self, x: int, y: int) -> RGBA:
        """Background colour for pixels whose ray misses the sphere."""
        s = self.settings
        return (x * s.scale // s.width, y * s.scale // s.height, 0, 255)

    def distance_color(self, t: float) -> RGBA:
        """Colour for a hit at ray parameter t."""
        red = (t - self.DISTANCE_OFFSET) * self.DISTANCE_GAIN
        return (saturate_u8(float(red)), 0, 0, 255)

    def pixel_color(self, sphere: Sphere, camera: Camera, x: int, y: int) -> RGBA:
        """Trace the ray for pixel (x, y) and return its RGBA colour."""
        t = sphere.intersect_t(camera.ray(x, y))
        if t is None:
            return self.gradient_color(x, y)
        return self.distance_color(t)

    def color_function(self, sphere: Sphere, camera: Camera) -> PixelColor:
        """Bind a scene to pixel_color, giving the (x, y) -> RGBA callable."""
        def color(x: int, y: int) -> RGBA:
            return self.pixel_color(sphere, camera, x, y)
        return color

    def render(self, sphere: Sphere, camera: Camera) -> np.ndarray:
        """Render the scene into an RGBA array of shape (height, width, 4).

        Rows are traced first: image[i, j] holds pixel_color(i, j).
        """
        return self.render_pixels(self.color_function(sphere, camera))

    def render_pixels(self, pixel_color: PixelColor) -> np.ndarray:
        """Evaluate pixel_color for every (row, column) into an RGBA array."""
        height = self.settings.height
        width = self.settings.width
        image = np.zeros((height, width, 4), dtype=np.uint8)

        for i in range(height):
            for j in range(width):
                image[i, j] = pixel_color(i, j)

        return image

    def write_ppm(self, stream: BinaryIO, pixel_color: PixelColor, binary: bool = False) -> None:
        """Write a PPM image to a binary stream.

        Args:
            stream: Destination opened in binary mode (e.g. sys.stdout.buffer)
            pixel_color: Callable returning RGBA for (row, column)
            binary: Write raw P6 bytes instead of P3 decimal triples
        """
        s = self.settings
        header = f"{'P6' if binary else 'P3'}\n{s.width} {s.height}\n{s.scale}\n"
        stream.write(header.encode('ascii'))

        for i in range(s.height):
            for j in range(s.width):
                r, g, b, _ = pixel_color(i, j)
                if binary:
                    stream.write(bytes((r, g, b)))
                else:
                    stream.write(f"{r} {g} {b}\n".encode('ascii'))

    def save_image(self, image: np.ndarray, filename: str) -> None:
        """Save a rendered RGBA image to file.

        Args:
            image: uint8 array of shape (height, width, 4)
            filename: Output filename (extension determines format)
        """
        from PIL import Image as PILImage

        # Alpha is always opaque; PPM and JPEG cannot store it anyway
        pil_image = PILImage.fromarray(np.ascontiguousarray(image[:, :, :3]))
        pil_image.save(filename)
