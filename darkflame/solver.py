"""The physics world and the base class of the objects that live in it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from .vector import Point3D, Vector3D


@dataclass
class Environment:
    """Physical parameters shared by every object of a world."""

    gravity: Vector3D = field(default_factory=Vector3D)


@dataclass
class Hit:
    """Result of a collision query: the reached point and the surface normal there."""

    point: Point3D
    normal: Vector3D = field(default_factory=Vector3D)


def _remove_all(items: List["PhysObject"], obj: "PhysObject") -> None:
    items[:] = [item for item in items if item is not obj]


class PhysObject(ABC):
    """An object that registers itself in a :class:`Solver` on creation."""

    def __init__(
        self,
        world: "Solver",
        position: Optional[Point3D] = None,
        rotation: Optional[Point3D] = None,
        scale: Optional[Point3D] = None,
    ) -> None:
        self.world: Optional[Solver] = world
        self.position = position.copy() if position is not None else Point3D()
        self.rotation = rotation.copy() if rotation is not None else Point3D()
        self.scale = scale.copy() if scale is not None else Point3D(1.0, 1.0, 1.0)
        self.external_force = Vector3D()
        self.put_in_world()

    def actors(self) -> List["PhysObject"]:
        """The active objects of this object's world."""
        if self.world is None:
            return []
        return self.world.actors()

    def put_in_world(self) -> None:
        """Register this object among its world's active objects."""
        if self.world is None:
            raise RuntimeError("object is not attached to a world")
        self.world.register(self)

    def remove_from_world(self) -> None:
        """Unregister this object from its world, if it still has one."""
        if self.world is not None:
            self.world.unregister(self)

    def collapse(self) -> None:
        """Forget the world, which is going away."""
        self.world = None

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the object's state by ``delta_time`` seconds."""

    @abstractmethod
    def collide(self, begin: Point3D, end: Point3D) -> Hit:
        """Trace the segment from ``begin`` to ``end`` against this object."""


class Solver:
    """A physics world: keeps track of active and disabled objects."""

    def __init__(self) -> None:
        self.env = Environment()
        self._active: List[PhysObject] = []
        self._disabled: List[PhysObject] = []

    def register(self, obj: PhysObject) -> None:
        self._active.append(obj)

    def unregister(self, obj: PhysObject) -> None:
        _remove_all(self._active, obj)

    def enable(self, obj: PhysObject) -> None:
        """Move ``obj`` from the disabled objects to the active ones."""
        self._active.append(obj)
        _remove_all(self._disabled, obj)

    def disable(self, obj: PhysObject) -> None:
        """Move ``obj`` from the active objects to the disabled ones."""
        _remove_all(self._active, obj)
        self._disabled.append(obj)

    def actors(self) -> List[PhysObject]:
        """A copy of the list of active objects."""
        return list(self._active)

    def disabled(self) -> List[PhysObject]:
        """A copy of the list of disabled objects."""
        return list(self._disabled)

    def close(self) -> None:
        """Detach every object from this world and forget them."""
        for obj in self._active + self._disabled:
            obj.collapse()
        self._active.clear()
        self._disabled.clear()

    def __enter__(self) -> Solver:
        return self

    def __exit__(self, *args) -> None:
        self.close()