"""Points and vectors in a Cartesian coordinate system."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPSILON = 0.000001


@dataclass
class Point3D:
    """A mutable point in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance(self, other: Point3D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def scale(self, factor: float) -> Point3D:
        """Multiply every coordinate by ``factor`` in place and return self."""
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    def set(self, x: float, y: float, z: float) -> None:
        """Replace all three coordinates."""
        self.x, self.y, self.z = x, y, z

    def copy(self) -> Point3D:
        return Point3D(self.x, self.y, self.z)

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


@dataclass
class Vector3D:
    """A mutable free vector in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_points(cls, begin: Point3D, end: Point3D) -> Vector3D:
        """Vector pointing from ``begin`` to ``end``."""
        return cls(end.x - begin.x, end.y - begin.y, end.z - begin.z)

    @classmethod
    def from_point(cls, point: Point3D) -> Vector3D:
        """Vector from the origin to ``point``."""
        return cls(point.x, point.y, point.z)

    def set(self, x: float, y: float, z: float) -> None:
        """Replace all three components."""
        self.x, self.y, self.z = x, y, z

    def copy(self) -> Vector3D:
        return Vector3D(self.x, self.y, self.z)

    def as_point(self) -> Point3D:
        """The tip of the vector as a point."""
        return Point3D(self.x, self.y, self.z)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iadd__(self, other: Vector3D) -> Vector3D:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3D) -> Vector3D:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def cross(self, other: Vector3D) -> Vector3D:
        """Vector (cross) product."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            -self.x * other.z + self.z * other.x,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other) -> float:
        """Scalar product with a vector or a point's coordinates."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def triple(self, v: Vector3D, w: Vector3D) -> float:
        """Scalar triple product ``self . (v x w)``."""
        result = self.x * (v.y * w.z - v.z * w.y)
        result -= self.y * (v.x * w.z - v.z * w.x)
        result += self.z * (v.x * w.y - v.y * w.x)
        return result

    def scale(self, factor: float) -> Vector3D:
        """Multiply every component by ``factor`` in place and return self."""
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    def add_to(self, point: Point3D) -> Point3D:
        """The point reached by moving ``point`` along this vector."""
        return Point3D(point.x + self.x, point.y + self.y, point.z + self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, point: Point3D) -> float:
        """Distance from the vector's tip to ``point``."""
        return math.sqrt(
            (point.x - self.x) ** 2 + (point.y - self.y) ** 2 + (point.z - self.z) ** 2
        )

    def set_length(self, length: float) -> bool:
        """Rescale to ``length``; a near-zero vector is left alone and False returned."""
        current = self.length()
        if current < _EPSILON:
            return False
        self.scale(length / current)
        return True

    def project_onto(self, base: Vector3D) -> bool:
        """Replace self with its projection on ``base``; False if ``base`` is near zero."""
        base_sq = base.x * base.x + base.y * base.y + base.z * base.z
        if base_sq < _EPSILON:
            return False
        k = self.dot(base) / base_sq
        self.x = base.x * k
        self.y = base.y * k
        self.z = base.z * k
        return True