import random

import pytest

from darkflame.particle import Emitter, Particle
from darkflame.solver import Solver
from darkflame.vector import Point3D, Vector3D


def test_negative_ttl_is_clamped():
    p = Particle(ttl=-5)
    assert p.ttl == 0
    assert not p.is_alive()


def test_update_past_lifetime_expires():
    p = Particle(ttl=0.5)
    assert p.update(1.0) is False
    assert p.ttl == 0
    assert not p.is_alive()


def test_free_motion():
    p = Particle(Point3D(0, 0, 0), 1, 1, Vector3D(1, 2, 3), 0, 10)
    assert p.update(1.0) is True
    assert p.position == Point3D(1, 2, 3)
    assert p.velocity == Vector3D(1, 2, 3)


def test_gravity_changes_velocity():
    g = Vector3D(0, 0, -9.8)
    p = Particle(ttl=10)
    p.update(1.0, gravity=g)
    assert p.velocity.z == pytest.approx(-9.8)
    assert p.position.z == pytest.approx(-4.9)


def test_volume_reaches_final_value_at_end_of_life():
    p = Particle(volume=1.0, ttl=2.0)
    p.set_final(5.0, 0.0)
    assert p.update(1.0)
    assert p.update(1.0)
    assert p.volume == pytest.approx(5.0)
    assert not p.update(1.0)


def test_angle_grows_with_spin():
    p = Particle(spin=3.0, ttl=10)
    p.update(1.0)
    assert p.angle == pytest.approx(3.0)


def test_input_vectors_are_copied():
    pos = Point3D(1, 1, 1)
    vel = Vector3D(1, 0, 0)
    p = Particle(pos, 1, 1, vel, 0, 5)
    p.update(1.0)
    assert pos == Point3D(1, 1, 1)
    assert vel == Vector3D(1, 0, 0)


def _emitter(world=None, pps=10.0, max_particles=5, seed=1):
    e = Emitter(world or Solver(), Point3D(0, 0, 0), pps, max_particles, random.Random(seed))
    e.p_mass = 1
    e.p_volume = 1
    e.p_ttl = 100
    return e


def test_inactive_emitter_emits_nothing():
    e = _emitter()
    e.update(1.0)
    assert e.dots() == []


def test_emission_capped_by_max():
    e = _emitter(pps=10, max_particles=5)
    e.start_emission()
    e.update(1.0)
    assert len(e.particles) == 5
    e.update(1.0)
    assert len(e.particles) == 5


def test_whole_rate_emits_exact_count():
    e = _emitter(pps=3, max_particles=100)
    e.start_emission()
    e.update(1.0)
    assert len(e.dots()) == 3


def test_fractional_rate_rounds_randomly():
    e = _emitter(pps=2.5, max_particles=100, seed=7)
    e.start_emission()
    e.update(1.0)
    assert len(e.particles) in (2, 3)


def test_expired_particles_are_removed():
    e = _emitter(pps=3, max_particles=100)
    e.p_ttl = 0.5
    e.start_emission()
    e.update(1.0)
    assert all(not p.is_alive() for p in e.particles)
    e.stop_emission()
    e.update(1.0)
    assert e.particles == []


def test_negative_pps_clamped():
    e = Emitter(Solver(), Point3D(), -4, 10)
    assert e.pps == 0
    e.configure(Point3D(1, 2, 3), -1)
    assert e.pps == 0
    assert e.position == Point3D(1, 2, 3)


def test_velocity_spread_within_delta():
    e = _emitter(pps=1000, max_particles=100, seed=3)
    e.p_velocity = Vector3D(1, 2, 3)
    e.p_delta_velocity = 0.5
    e.start_emission()
    e.update(0.01)
    assert len(e.particles) == 10
    for p in e.particles:
        for got, base in zip(p.velocity, (1, 2, 3)):
            assert base - 0.5 <= got <= base + 0.5


def test_world_gravity_applied():
    world = Solver()
    world.env.gravity = Vector3D(0, -2, 0)
    e = _emitter(world, pps=1, max_particles=10)
    e.start_emission()
    e.update(1.0)
    assert len(e.particles) == 1
    assert e.particles[0].velocity == Vector3D(0, -2, 0)


def test_collide_returns_end():
    e = _emitter()
    hit = e.collide(Point3D(0, 0, 0), Point3D(4, 5, 6))
    assert hit.point == Point3D(4, 5, 6)


def test_clone_is_independent_and_registered():
    world = Solver()
    e = _emitter(world, pps=3, max_particles=100)
    e.start_emission()
    e.update(1.0)
    copy = e.clone()
    assert world.actors() == [e, copy]
    assert copy.dots() == e.dots()
    assert copy.is_active
    copy.particles[0].position.x = 99
    assert e.particles[0].position.x != 99
    assert copy.p_ttl == e.p_ttl


def test_emitter_registers_in_world():
    world = Solver()
    e = _emitter(world)
    e.remove_from_world()
    assert world.actors() == []