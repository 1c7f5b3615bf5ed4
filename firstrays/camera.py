"""
Camera module for generating primary rays.

The camera is described by a position, a viewing direction and a "height"
vector spanning the vertical extent of the image plane. The horizontal
extent is derived from those two vectors.
"""

from __future__ import annotations
from .vec3 import Vec3, Point3, SCALAR
from .ray import Ray


class Camera:
    """A pinhole camera producing one ray per pixel coordinate."""

    __slots__ = ('_position', '_direction', '_height', '_image_width', '_image_height')

    def __init__(
        self,
        position: Point3,
        direction: Vec3,
        height: Vec3,
        image_width: int = 255,
        image_height: int = 255
    ):
        """Create a camera.

        Args:
            position: Camera position in world space
            direction: Vector from the camera to the centre of the image plane
            height: "Up" vector spanning the image plane vertically; need not
                be unit length or perpendicular to direction
            image_width: Number of pixel columns the coordinates are divided by
            image_height: Number of pixel rows the coordinates are divided by
        """
        self._position = position
        self._direction = direction
        self._height = height
        self._image_width = image_width
        self._image_height = image_height

    @property
    def position(self) -> Point3:
        return self._position

    @property
    def direction(self) -> Vec3:
        return self._direction

    @property
    def height(self) -> Vec3:
        return self._height

    @property
    def image_width(self) -> int:
        return self._image_width

    @property
    def image_height(self) -> int:
        return self._image_height

    def right_vector(self) -> Vec3:
        """Vector of the same length as height, perpendicular to it and to direction.

        NaN when direction and height are parallel.
        """
        w = self.direction.cross(self.height)
        return w / w.length() * self.height.length()

    def ray(self, x: int, y: int) -> Ray:
        """Generate the ray for pixel coordinate (x, y).

        The first coordinate offsets along height and the second along the
        derived right vector. The direction is not normalized.
        """
        vertical_offset = SCALAR(x) / SCALAR(self.image_width) - SCALAR(0.5)
        horizontal_offset = SCALAR(y) / SCALAR(self.image_height) - SCALAR(0.5)
        return Ray(
            self.position,
            self.direction + self.height * vertical_offset + self.right_vector() * horizontal_offset
        )

    def __repr__(self) -> str:
        return (
            f"Camera(position={self.position}, direction={self.direction}, "
            f"height={self.height})"
        )
