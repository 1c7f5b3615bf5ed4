"""
Geometric primitives that rays can intersect.

Only spheres are supported; the scene is a single sphere tested by brute
force for every ray.
"""

from __future__ import annotations
from typing import Optional
import numpy as np

from .vec3 import Vec3, Point3
from .ray import Ray


class Sphere:
    """A sphere defined by centre position and radius."""

    __slots__ = ('_radius', '_position')

    def __init__(self, radius: float, position: Point3):
        """Create a sphere.

        Args:
            radius: Radius of the sphere (expected to be >= 0, not checked)
            position: Centre point of the sphere
        """
        self._radius = radius
        self._position = position

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def position(self) -> Point3:
        return self._position

    @np.errstate(divide='ignore', invalid='ignore')
    def intersect_t(self, ray: Ray) -> Optional[float]:
        """Return the nearest non-negative ray parameter t on the surface.

        A point P is on the sphere S with radius r when (P-S).(P-S) = r².
        A point on the ray is P(t) = O + tD, so a hit needs

            (D.D)t² + 2(D.(O-S))t + (O-S).(O-S) - r² = 0

        which is solved with the quadratic formula. None means the ray
        misses the sphere or the sphere lies entirely behind the origin.
        """
        os = ray.origin - self.position

        # a = D.D is always positive for a non-zero direction
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(os)
        c = os.dot(os) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c

        # Negative discriminant: imaginary roots, the ray misses
        if discriminant < 0.0:
            return None

        # Since a > 0, t1 <= t2, so a non-negative t1 is the closer hit.
        # A zero discriminant (tangent ray) lands here too.
        t1 = (-b - np.sqrt(discriminant)) / (2.0 * a)
        if t1 >= 0.0:
            return t1

        # Origin inside the sphere: only the far root is in front
        t2 = (-b + np.sqrt(discriminant)) / (2.0 * a)
        if t2 > 0.0:
            return t2

        # Both roots negative: the sphere is behind the ray
        return None

    def intersect(self, ray: Ray) -> Optional[Point3]:
        """Return the hit point of the ray on the sphere, if any."""
        t = self.intersect_t(ray)
        if t is None:
            return None
        return ray.at(t)

    def __repr__(self) -> str:
        return f"Sphere(radius={self.radius}, position={self.position})"
