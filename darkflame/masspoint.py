"""Mass-spring physics: point masses joined by damped springs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .vector import Point3D, Vector3D

_EPSILON = 0.000001


@dataclass
class Connection:
    """A spring from one mass point to ``other``."""

    other: "MassPoint"
    curr_length: float
    prev_length: float
    low_coeff: float
    high_coeff: float
    damping: float


class MassPoint:
    """A point mass with velocity, an accumulated force and spring links."""

    def __init__(
        self,
        mass: float = 0.0,
        position: Optional[Point3D] = None,
        velocity: Optional[Vector3D] = None,
    ) -> None:
        self.mass = mass
        self.position = position.copy() if position is not None else Point3D()
        self.velocity = velocity.copy() if velocity is not None else Vector3D()
        self.force = Vector3D()
        self.links: List[Connection] = []

    def reset(self, mass: float, position: Point3D, velocity: Vector3D) -> None:
        """Set mass, position and velocity and clear the accumulated force."""
        self.mass = mass
        self.position = position.copy()
        self.velocity = velocity.copy()
        self.force = Vector3D()

    def link(
        self, other: MassPoint, low_coeff: float, high_coeff: float, damping: float
    ) -> Connection:
        """Attach a spring to ``other`` whose rest length is the current distance.

        ``low_coeff`` is the stiffness when compressed, ``high_coeff`` when stretched.
        """
        length = Vector3D.from_points(self.position, other.position).length()
        connection = Connection(other, length, length, low_coeff, high_coeff, damping)
        self.links.append(connection)
        return connection

    def add_external_force(self, force: Vector3D) -> None:
        """Accumulate ``force`` for the next update."""
        self.force += force

    def _apply_link_forces(self, dt: float) -> None:
        """Add the spring and damping forces of every link to both ends."""
        for link in self.links:
            r = Vector3D.from_points(self.position, link.other.position)
            modulus = r.length()
            if modulus > _EPSILON:
                r.scale(1 / modulus)
            else:
                r.set(0.0, 0.0, 0.0)

            c = (link.prev_length - modulus) * link.damping * self.mass / dt
            damping_force = r.copy().scale(c)
            link.other.force += damping_force
            self.force -= damping_force

            delta = (modulus - link.curr_length) / link.curr_length
            r.scale(delta * link.low_coeff if delta < 0 else delta * link.high_coeff)
            self.force += r
            link.other.force -= r

            link.prev_length = modulus

    def reflect(self, normal: Vector3D, coeff: float = 1.0) -> None:
        """Reverse the velocity component along ``normal``, scaled by ``coeff``."""
        normal_part = self.velocity.copy()
        normal_part.project_onto(normal)
        tangential = self.velocity - normal_part
        normal_part.scale(coeff)
        self.velocity = tangential - normal_part

    def friction(self, normal: Vector3D, coeff: float = 1.0) -> None:
        """Scale the velocity component across ``normal`` by ``coeff``."""
        normal_part = self.velocity.copy()
        normal_part.project_onto(normal)
        tangential = self.velocity - normal_part
        tangential.scale(coeff)
        self.velocity = tangential + normal_part

    def impulse(self) -> Vector3D:
        """Momentum: velocity times mass."""
        return self.velocity.copy().scale(self.mass)

    def update(self, dt: float) -> Point3D:
        """Integrate the accumulated force over ``dt``, clear it and return the position.

        Raises ZeroDivisionError for a massless point.
        """
        self.force.scale(1 / self.mass)
        self.force.scale(dt)
        self.velocity += self.force
        self.velocity.scale(dt)
        self.position = self.velocity.add_to(self.position)
        self.velocity.scale(0.5)
        self.position = self.velocity.add_to(self.position)
        self.force = Vector3D()
        return self.position.copy()

    def clone(self) -> MassPoint:
        """An independent copy whose links point at the same partners."""
        other = MassPoint(self.mass, self.position, self.velocity)
        other.force = self.force.copy()
        other.links = [
            Connection(
                link.other,
                link.curr_length,
                link.prev_length,
                link.low_coeff,
                link.high_coeff,
                link.damping,
            )
            for link in self.links
        ]
        return other