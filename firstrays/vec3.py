"""
Vector3 class for 3D math operations.

This is the fundamental building block of the ray tracer, used for:
- Points in 3D space
- Direction vectors
- Camera basis vectors

Components are stored in single precision. Degenerate input (NaN, division
by zero) propagates through the arithmetic instead of raising.
"""

from __future__ import annotations
from typing import Union
import numpy as np

# Scalar type of every component and of dot/length results
SCALAR = np.float32


class Vec3:
    """An immutable 3D vector.

    Uses numpy internally for efficient computation while providing
    a clean, Pythonic API. Every operation returns a new instance.
    """

    __slots__ = ('_data',)

    # Make numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=SCALAR)
        self._data.flags.writeable = False

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array."""
        v = cls.__new__(cls)
        v._data = np.array(arr, dtype=SCALAR)
        v._data.flags.writeable = False
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    # Floats can be NaN and NaN != NaN, so equality is only partial.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.all(self._data == other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data.tolist()))

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data + other._data)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: Union[float, int]) -> Vec3:
        if isinstance(other, Vec3):
            return NotImplemented
        return Vec3.from_array(self._data * SCALAR(other))

    def __rmul__(self, other: Union[float, int]) -> Vec3:
        return self.__mul__(other)

    def __truediv__(self, other: Union[float, int]) -> Vec3:
        if isinstance(other, Vec3):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vec3.from_array(self._data / SCALAR(other))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self):
        return iter(self._data.tolist())

    def length(self) -> np.float32:
        """Return the Euclidean norm, sqrt(v . v)."""
        return np.sqrt(self.dot(self))

    def dot(self, other: Vec3) -> np.float32:
        """Compute dot product with another vector.

        Summed left to right in single precision; np.dot may reorder or
        fuse the products and round differently.
        """
        a, b = self._data, other._data
        return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

    def cross(self, other: Vec3) -> Vec3:
        """Compute the right-handed cross product with another vector."""
        a, b = self._data, other._data
        return Vec3.from_array([
            a[1] * b[2] - b[1] * a[2],
            a[2] * b[0] - b[2] * a[0],
            a[0] * b[1] - b[0] * a[1],
        ])

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


# Convenience type alias
Point3 = Vec3
