"""Hitbox tests, view-frustum culling, plane reflection and triangles."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import List, Optional, Sequence

from .vector import Point3D, Vector3D

_SQRT2 = 1.41421356
_FULL_TURN = 6.2829
_SEGMENT_TOLERANCE = 0.000001


def triangle_in_cube(
    centre: Point3D, half_edge: float, a: Point3D, b: Point3D, c: Point3D
) -> bool:
    """True unless all three vertices lie beyond one face of the axis-aligned cube."""
    for axis in ("x", "y", "z"):
        low = getattr(centre, axis) - half_edge
        high = getattr(centre, axis) + half_edge
        coords = (getattr(a, axis), getattr(b, axis), getattr(c, axis))
        if all(v < low for v in coords) or all(v > high for v in coords):
            return False
    return True


def line_in_cube(centre: Point3D, half_edge: float, begin: Point3D, end: Point3D) -> bool:
    """True if the segment touches the cube's circumscribed sphere hitbox."""
    radius = half_edge * _SQRT2

    line = Vector3D.from_points(begin, end)
    to_centre = Vector3D.from_points(begin, centre)
    to_centre.project_onto(line)

    foot = to_centre.add_to(begin)
    if centre.distance(foot) > radius:
        return False
    if centre.distance(begin) <= radius:
        return True
    if centre.distance(end) <= radius:
        return True

    beyond = line + to_centre
    a = to_centre.length()
    b = line.length()
    c = beyond.length()
    return a <= b and c >= a + b - _SEGMENT_TOLERANCE


def mirror_matrix(plane_point: Point3D, plane_normal: Vector3D) -> List[float]:
    """Reflection matrix for the plane, as 16 floats with index ``row * 4 + column``.

    The translation sits in the last row, so a point is transformed as the row
    vector ``[x, y, z, 1]`` multiplied by the matrix.
    """
    n = plane_normal
    d = plane_point.x * n.x + plane_point.y * n.y + plane_point.z * n.z
    return [
        1 - 2 * n.x * n.x, -2 * n.y * n.x, -2 * n.z * n.x, 0.0,
        -2 * n.x * n.y, 1 - 2 * n.y * n.y, -2 * n.z * n.y, 0.0,
        -2 * n.x * n.z, -2 * n.y * n.z, 1 - 2 * n.z * n.z, 0.0,
        2 * d * n.x, 2 * d * n.y, 2 * d * n.z, 1.0,
    ]


class Visibility(IntEnum):
    """How much of a box lies inside the frustum."""

    INVISIBLE = 0
    PARTIAL = 1
    FULL = 2


_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class Frustum:
    """The six clipping planes of a view pyramid (right, left, bottom, top, back, front)."""

    def __init__(
        self,
        projection: Optional[Sequence[float]] = None,
        modelview: Optional[Sequence[float]] = None,
    ) -> None:
        self.planes: List[List[float]] = []
        self.set_planes(projection or _IDENTITY, modelview or _IDENTITY)

    def set_planes(self, projection: Sequence[float], modelview: Sequence[float]) -> None:
        """Derive the normalised planes from 16-element projection and model-view matrices."""
        proj = list(projection)
        modl = list(modelview)
        if len(proj) != 16 or len(modl) != 16:
            raise ValueError("matrices must have 16 elements")

        clip = [
            sum(modl[row * 4 + k] * proj[k * 4 + col] for k in range(4))
            for row in range(4)
            for col in range(4)
        ]

        def plane(sign: int, column: int) -> List[float]:
            raw = [clip[r * 4 + 3] + sign * clip[r * 4 + column] for r in range(4)]
            norm = math.sqrt(raw[0] ** 2 + raw[1] ** 2 + raw[2] ** 2)
            if norm == 0:
                raise ValueError("matrices produce a degenerate clipping plane")
            return [v / norm for v in raw]

        self.planes = [
            plane(-1, 0),  # right
            plane(1, 0),   # left
            plane(1, 1),   # bottom
            plane(-1, 1),  # top
            plane(-1, 2),  # back
            plane(1, 2),   # front
        ]

    def sphere_visible(self, centre: Point3D, radius: float) -> float:
        """Distance to the near clipping plane plus ``radius``, or 0 if invisible."""
        d = 0.0
        for a, b, c, w in self.planes:
            d = a * centre.x + b * centre.y + c * centre.z + w
            if d <= -radius:
                return 0.0
        return d + radius

    def cube_visible(self, centre: Point3D, half_edge: float) -> bool:
        """True if some part of the axis-aligned cube is inside the frustum."""
        for a, b, c, w in self.planes:
            xs = (a * (centre.x - half_edge), a * (centre.x + half_edge))
            ys = (b * (centre.y - half_edge), b * (centre.y + half_edge))
            zs = (c * (centre.z - half_edge), c * (centre.z + half_edge))
            if not any(x + y + z + w > 0 for z in zs for y in ys for x in xs):
                return False
        return True

    def box_visible(self, origin: Point3D, sides: Point3D) -> Visibility:
        """Classify the box spanning ``origin`` to ``origin + sides``."""
        fully_inside = 0
        for a, b, c, w in self.planes:
            xs = (a * origin.x, a * (origin.x + sides.x))
            ys = (b * origin.y, b * (origin.y + sides.y))
            zs = (c * origin.z, c * (origin.z + sides.z))
            count = sum(1 for z in zs for y in ys for x in xs if x + y + z + w > 0)
            if count == 0:
                return Visibility.INVISIBLE
            if count == 8:
                fully_inside += 1
        return Visibility.FULL if fully_inside == 6 else Visibility.PARTIAL


def _unit_angle(u: Vector3D, v: Vector3D) -> float:
    return math.acos(max(-1.0, min(1.0, u.dot(v))))


class Triangle:
    """A triangle with its unit normal and plane offset ``d`` (``normal . p = d``)."""

    def __init__(self, a: Point3D, b: Point3D, c: Point3D) -> None:
        self.a = a.copy()
        self.b = b.copy()
        self.c = c.copy()
        self.normal = Vector3D.from_points(self.a, self.b).cross(
            Vector3D.from_points(self.a, self.c)
        )
        if self.normal.length() == 0:
            self.normal = Vector3D(0.0, 0.0, 0.0)
            self.d = 0.0
            self._degenerate = True
        else:
            self.normal.set_length(1.0)
            self.d = self.normal.dot(self.a)
            self._degenerate = False

    def is_degenerate(self) -> bool:
        """True if the vertices are collinear."""
        return self._degenerate

    def _plane_point(self, start: Point3D, direction: Vector3D) -> Optional[Point3D]:
        r = direction.copy()
        r.set_length(1.0)
        denominator = r.dot(self.normal)
        if denominator == 0:
            return None
        t = (self.d - self.normal.dot(start)) / denominator
        r.set_length(t)
        return r.add_to(start)

    def _contains(self, point: Point3D) -> bool:
        i = Vector3D.from_points(point, self.a)
        j = Vector3D.from_points(point, self.b)
        k = Vector3D.from_points(point, self.c)
        for v in (i, j, k):
            v.set_length(1.0)
        total = _unit_angle(i, j) + _unit_angle(j, k) + _unit_angle(k, i)
        return total >= _FULL_TURN

    def collision(self, begin: Point3D, end: Point3D) -> Point3D:
        """Where the segment crosses the triangle, or ``end`` if it does not."""
        if self._degenerate:
            return end.copy()
        d1 = self.normal.dot(begin) - self.d
        d2 = self.normal.dot(end) - self.d
        if d1 * d2 >= 0:
            return end.copy()
        hit = self._plane_point(begin, Vector3D.from_points(begin, end))
        if hit is None or not self._contains(hit):
            return end.copy()
        return hit

    def ray_collision(self, position: Point3D, vector: Vector3D) -> Point3D:
        """Where the line through ``position`` along ``vector`` meets the triangle's plane.

        Returns ``position`` for a degenerate triangle or a line parallel to the plane.
        """
        if self._degenerate:
            return position.copy()
        hit = self._plane_point(position, vector)
        return position.copy() if hit is None else hit

    def nested(self) -> Triangle:
        """The triangle joining the edge midpoints, with reversed winding."""
        ab = (self.a + self.b).scale(0.5)
        bc = (self.b + self.c).scale(0.5)
        ca = (self.c + self.a).scale(0.5)
        return Triangle(ca, bc, ab)