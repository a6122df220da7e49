"""Particles and the emitter that spawns them."""

from __future__ import annotations

import random
from typing import List, Optional

from .solver import Hit, PhysObject, Solver
from .vector import Point3D, Vector3D

_RAND_MAX = 0x7FFFFFFF


class Particle:
    """A point particle with a finite lifetime.

    Volume and spin are interpolated towards their final values over the
    remaining time to live.
    """

    def __init__(
        self,
        position: Optional[Point3D] = None,
        mass: float = 1.0,
        volume: float = 1.0,
        velocity: Optional[Vector3D] = None,
        spin: float = 0.0,
        ttl: float = 0.0,
    ) -> None:
        self.position = Point3D()
        self.velocity = Vector3D()
        self.mass = 1.0
        self.volume = 1.0
        self.spin = 0.0
        self.ttl = 0.0
        self.set_start(position or Point3D(), mass, volume, velocity or Vector3D(), spin, ttl)
        self.final_volume = self.volume
        self.final_spin = self.spin
        self.angle = 0.0

    def set_start(
        self,
        position: Point3D,
        mass: float,
        volume: float,
        velocity: Vector3D,
        spin: float,
        ttl: float,
    ) -> None:
        """Set the starting state; a negative ``ttl`` becomes zero."""
        self.position = position.copy()
        self.mass = mass
        self.volume = volume
        self.velocity = velocity.copy()
        self.spin = spin
        self.ttl = max(ttl, 0.0)

    def set_final(self, final_volume: float, final_spin: float, angle: float = 0.0) -> None:
        """Set the values reached at the end of life and the current angle."""
        self.angle = angle
        self.final_volume = final_volume
        self.final_spin = final_spin

    def update(
        self,
        dt: float,
        env_density: float = 0.0,
        env_force: Optional[Vector3D] = None,
        gravity: Optional[Vector3D] = None,
    ) -> bool:
        """Advance by ``dt``; returns False once the particle has expired."""
        if dt > self.ttl or not self.ttl:
            self.ttl = 0.0
            return False

        self.angle += self.spin * dt
        remaining = self.ttl - dt
        inverse = 1.0 / self.ttl
        self.volume = (self.volume * remaining + self.final_volume * dt) * inverse
        self.spin = (self.spin * remaining + self.final_spin * dt) * inverse
        self.ttl -= dt

        added = Vector3D()
        if env_force is not None:
            added = env_force.copy().scale(dt / self.mass)

        if gravity is not None:
            from_gravity = gravity.copy().scale(dt)
            if env_density > 0:
                buoyancy = gravity.copy().scale(-env_density * self.volume * dt / self.mass)
                from_gravity = from_gravity + buoyancy
            added = added + from_gravity

        self.position.x += (self.velocity.x + 0.5 * added.x) * dt
        self.position.y += (self.velocity.y + 0.5 * added.y) * dt
        self.position.z += (self.velocity.z + 0.5 * added.z) * dt
        self.velocity = self.velocity + added
        return True

    def is_alive(self) -> bool:
        return self.ttl != 0

    def copy(self) -> Particle:
        clone = Particle(self.position, self.mass, self.volume, self.velocity, self.spin, self.ttl)
        clone.set_final(self.final_volume, self.final_spin, self.angle)
        return clone


class Emitter(PhysObject):
    """Spawns particles at ``pps`` per second, up to ``max_particles`` alive at once."""

    def __init__(
        self,
        world: Solver,
        position: Optional[Point3D] = None,
        pps: float = 0.0,
        max_particles: int = 0,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(world, position)
        self.particles: List[Particle] = []
        self.max_particles = max_particles
        self.is_active = False
        self.pps = max(pps, 0.0)
        self.env_density = 0.0
        self.ext_force = Vector3D()
        self._rng = rng if rng is not None else random.Random()

        self.p_mass = 0.0
        self.p_volume = 0.0
        self.p_velocity = Vector3D()
        self.p_spin = 0.0
        self.p_ttl = 0.0
        self.p_f_volume = 0.0
        self.p_f_spin = 0.0
        self.p_delta_mass = 0.0
        self.p_delta_volume = 0.0
        self.p_delta_velocity = 0.0
        self.p_delta_spin = 0.0
        self.p_delta_ttl = 0.0

    def configure(self, position: Point3D, pps: float) -> None:
        """Move the emitter and change its rate; a negative rate becomes zero."""
        self.position = position.copy()
        self.pps = max(pps, 0.0)

    def start_emission(self) -> None:
        self.is_active = True

    def stop_emission(self) -> None:
        self.is_active = False

    def update(self, delta_time: float = 0.0) -> None:
        """Drop expired particles, emit new ones and advance them all."""
        alive = [p for p in self.particles if p.is_alive()]

        emitted: List[Particle] = []
        if self.is_active:
            chance = self._rng.random()
            wanted = self.pps * delta_time
            quantity = int(wanted)
            if chance < wanted - quantity:
                quantity += 1
            if quantity + len(alive) > self.max_particles:
                quantity = max(self.max_particles - len(alive), 0)
            emitted = [self._new_particle() for _ in range(quantity)]

        self.particles = alive + emitted

        gravity = self.world.env.gravity if self.world is not None else None
        for particle in self.particles:
            particle.update(delta_time, self.env_density, self.ext_force, gravity)

    def _spread(self) -> float:
        return self._rng.random() * 2 - 1

    def _new_particle(self) -> Particle:
        volume = self.p_volume
        spin = self.p_spin
        ttl = self.p_ttl
        velocity = self.p_velocity.copy()

        if self.p_delta_volume:
            volume += self._spread() * self.p_delta_volume
        if self.p_delta_spin:
            spin += self._spread() * self.p_delta_spin
        if self.p_delta_ttl:
            ttl += self._spread() * self.p_delta_ttl
        if self.p_delta_velocity:
            velocity.x += self._spread() * self.p_delta_velocity
            velocity.y += self._spread() * self.p_delta_velocity
            velocity.z += self._spread() * self.p_delta_velocity

        angle = self._rng.randint(0, _RAND_MAX) * 3.95
        particle = Particle()
        particle.set_start(self.position, self.p_mass, volume, velocity, spin, ttl)
        particle.set_final(self.p_f_volume, self.p_f_spin, angle)
        return particle

    def dots(self) -> List[Point3D]:
        """Copies of the positions of the current particles."""
        return [p.position.copy() for p in self.particles]

    def collide(self, begin: Point3D, end: Point3D) -> Hit:
        """Particles never block a segment: the end point is always reached."""
        return Hit(end.copy())

    def clone(self) -> Emitter:
        """An independent copy, registered in the same world."""
        if self.world is None:
            raise RuntimeError("object is not attached to a world")
        other = Emitter(self.world, self.position, self.pps, self.max_particles, self._rng)
        other.rotation = self.rotation.copy()
        other.scale = self.scale.copy()
        other.external_force = self.external_force.copy()
        other.particles = [p.copy() for p in self.particles]
        other.is_active = self.is_active
        other.env_density = self.env_density
        other.ext_force = self.ext_force.copy()
        other.p_mass = self.p_mass
        other.p_volume = self.p_volume
        other.p_velocity = self.p_velocity.copy()
        other.p_spin = self.p_spin
        other.p_ttl = self.p_ttl
        other.p_f_volume = self.p_f_volume
        other.p_f_spin = self.p_f_spin
        other.p_delta_mass = self.p_delta_mass
        other.p_delta_volume = self.p_delta_volume
        other.p_delta_velocity = self.p_delta_velocity
        other.p_delta_spin = self.p_delta_spin
        other.p_delta_ttl = self.p_delta_ttl
        return other