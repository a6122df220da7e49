"""A square liquid surface on which waves propagate."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .geometry import Triangle
from .solver import Hit, PhysObject, Solver
from .vector import Point3D, Vector3D


@dataclass
class WaveVertex:
    """A surface node: its position, its normal and whether it oscillates."""

    coord: Point3D = field(default_factory=Point3D)
    normal: Vector3D = field(default_factory=Vector3D)
    is_active: bool = True


class Wave(PhysObject):
    """A ``dimension`` x ``dimension`` height field spanning [-1, 1] in x and y.

    The simulation advances in fixed steps of ``1 / frames_per_second``; the
    leftover time is carried to the next update. A dimension below one or a
    rate of at most 0.01 frames per second gives an empty surface.
    """

    def __init__(
        self,
        world: Solver,
        position: Optional[Point3D] = None,
        rotation: Optional[Point3D] = None,
        scale: Optional[Point3D] = None,
        dimension: int = 0,
        wave_height: float = 0.0,
        frames_per_second: float = 30.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(world, position, rotation, scale)
        self._rng = rng if rng is not None else random.Random()
        self.vertices: List[WaveVertex] = []
        self._prev: List[float] = []
        self._next: List[float] = []
        self.dimension = 0
        self.wave_height = 0.0
        self.frame_time = 0.0
        self._remainder = 0.0

        if dimension <= 0 or frames_per_second <= 0.01:
            return
        if dimension == 1:
            raise ValueError("a wave surface needs a dimension of at least 2")

        self.dimension = dimension
        self.wave_height = min(max(wave_height, 0.0), 1.0)
        self.frame_time = 1 / frames_per_second

        span = dimension - 1
        self.vertices = [
            WaveVertex(
                Point3D(1.0 - 2.0 * i / span, 1.0 - 2.0 * j / span, 0.0),
                Vector3D(0.0, 0.0, -4.0 / span),
            )
            for i in range(dimension)
            for j in range(dimension)
        ]
        self._prev = [0.0] * len(self.vertices)
        self._next = [0.0] * len(self.vertices)

    def update(self, delta_time: float = 0.0) -> None:
        """Advance the surface by as many whole steps as ``delta_time`` allows."""
        if not self.dimension:
            return

        dim = self.dimension
        damping = self.wave_height
        delta_time += self._remainder
        while delta_time > self.frame_time:
            prev, nxt = self._prev, self._next
            for i in range(1, dim - 1):
                for j in range(1, dim - 1):
                    idx = dim * i + j
                    vertex = self.vertices[idx]
                    vertex.coord.z = nxt[idx]
                    vertex.normal.x = nxt[idx - dim] - nxt[idx + dim]
                    vertex.normal.y = nxt[idx - 1] - nxt[idx + 1]

                    if vertex.is_active:
                        laplacian = (
                            -nxt[idx]
                            + 0.175 * (nxt[idx - dim] + nxt[idx + dim] + nxt[idx + 1] + nxt[idx - 1])
                            + 0.075
                            * (
                                nxt[idx - dim - 1]
                                + nxt[idx - dim + 1]
                                + nxt[idx + dim - 1]
                                + nxt[idx + dim + 1]
                            )
                        )
                        prev[idx] = (2.0 - damping) * nxt[idx] - (1.0 - damping) * prev[idx] + laplacian
                    else:
                        prev[idx] = 0.0
            self._prev, self._next = nxt, prev
            delta_time -= self.frame_time

        self._remainder = delta_time

    def randomize(self, force: float = 1.0) -> None:
        """Push a randomly chosen node down by ``wave_height * force``."""
        if not self.dimension:
            return
        row = self._rng.randrange(self.dimension)
        column = self._rng.randrange(self.dimension)
        self._next[self.dimension * row + column] -= self.wave_height * force

    def _triangles(self):
        dim = self.dimension
        for i in range(dim - 1):
            for j in range(dim - 1):
                idx = dim * i + j
                yield (idx, idx + 1, idx + dim + 1)
        for i in range(dim - 1):
            for j in range(dim - 1):
                idx = dim * i + j
                yield (idx, idx + dim + 1, idx + dim)

    def collide(self, begin: Point3D, end: Point3D) -> Hit:
        """The nearest crossing of the segment with the surface, or ``end`` with a zero normal."""
        nearest = Vector3D.from_points(begin, end).length()
        point = end.copy()
        normal = Vector3D()

        for a, b, c in self._triangles():
            triangle = Triangle(
                self.vertices[a].coord, self.vertices[b].coord, self.vertices[c].coord
            )
            if triangle.is_degenerate():
                continue
            crossing = triangle.collision(begin, end)
            distance = Vector3D.from_points(begin, crossing).length()
            if nearest <= distance:
                continue
            nearest = distance
            point = crossing
            normal = triangle.normal.copy()

        return Hit(point, normal)

    def clone(self) -> Wave:
        """An independent copy registered in the same world; leftover time is not copied."""
        if self.world is None:
            raise RuntimeError("object is not attached to a world")
        other = Wave(self.world, self.position, self.rotation, self.scale, rng=self._rng)
        other.external_force = self.external_force.copy()
        if not self.vertices:
            return other
        other.dimension = self.dimension
        other.wave_height = self.wave_height
        other.frame_time = self.frame_time
        other.vertices = [
            WaveVertex(v.coord.copy(), v.normal.copy(), v.is_active) for v in self.vertices
        ]
        other._prev = list(self._prev)
        other._next = list(self._next)
        return other