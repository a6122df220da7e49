import pytest

from darkflame.masspoint import Connection, MassPoint
from darkflame.vector import Point3D, Vector3D


def test_defaults_are_at_rest_at_origin():
    point = MassPoint()
    assert point.mass == 0
    assert tuple(point.position) == (0, 0, 0)
    assert tuple(point.velocity) == (0, 0, 0)
    assert tuple(point.force) == (0, 0, 0)
    assert point.links == []


def test_constructor_copies_arguments():
    position = Point3D(1, 2, 3)
    velocity = Vector3D(4, 5, 6)
    point = MassPoint(2.0, position, velocity)
    position.x = 100
    velocity.x = 100
    assert point.position.x == 1
    assert point.velocity.x == 4


def test_impulse_is_velocity_times_mass():
    point = MassPoint(2.0, Point3D(), Vector3D(1, 2, 3))
    assert tuple(point.impulse()) == pytest.approx((2, 4, 6))
    assert tuple(point.velocity) == (1, 2, 3)


def test_reflect_with_unit_coeff_negates_normal_component():
    point = MassPoint(1.0, Point3D(), Vector3D(1, 2, 3))
    point.reflect(Vector3D(0, 0, 1))
    assert tuple(point.velocity) == pytest.approx((1, 2, -3))


def test_reflect_scales_normal_component():
    point = MassPoint(1.0, Point3D(), Vector3D(1, 2, 4))
    point.reflect(Vector3D(0, 0, 5), 0.5)
    assert point.velocity.x == pytest.approx(1)
    assert point.velocity.y == pytest.approx(2)
    assert point.velocity.z == pytest.approx(-4 * 0.5)


def test_friction_scales_tangential_component_only():
    point = MassPoint(1.0, Point3D(), Vector3D(2, 4, 3))
    point.friction(Vector3D(0, 0, 1), 0.5)
    assert point.velocity.x == pytest.approx(2 * 0.5)
    assert point.velocity.y == pytest.approx(4 * 0.5)
    assert point.velocity.z == pytest.approx(3)


def test_friction_with_unit_coeff_keeps_velocity():
    point = MassPoint(1.0, Point3D(), Vector3D(2, -1, 3))
    point.friction(Vector3D(1, 1, 0))
    assert tuple(point.velocity) == pytest.approx((2, -1, 3))


def test_external_forces_accumulate_and_update_clears_them():
    point = MassPoint(1.0)
    point.add_external_force(Vector3D(1, 0, 0))
    point.add_external_force(Vector3D(0, 2, 0))
    assert tuple(point.force) == (1, 2, 0)
    point.update(0.1)
    assert tuple(point.force) == (0, 0, 0)


def test_update_returns_new_position():
    point = MassPoint(1.0, Point3D(), Vector3D(1, 0, 0))
    result = point.update(2.0)
    assert tuple(result) == pytest.approx((3, 0, 0))
    assert tuple(result) == tuple(point.position)


def test_update_without_velocity_or_force_stays_put():
    point = MassPoint(3.0, Point3D(1, 2, 3))
    point.update(0.5)
    assert tuple(point.position) == (1, 2, 3)


def test_force_moves_point_along_force():
    point = MassPoint(2.0)
    point.add_external_force(Vector3D(0, 0, -4))
    point.update(1.0)
    assert point.position.z < 0
    assert point.position.x == 0
    assert point.position.y == 0


def test_massless_point_cannot_update():
    point = MassPoint(0.0)
    with pytest.raises(ZeroDivisionError):
        point.update(1.0)


def test_link_uses_current_distance_as_rest_length():
    a = MassPoint(1.0, Point3D(0, 0, 0))
    b = MassPoint(1.0, Point3D(3, 4, 0))
    connection = a.link(b, 1.0, 2.0, 0.1)
    assert isinstance(connection, Connection)
    assert a.links == [connection]
    assert connection.other is b
    assert connection.curr_length == pytest.approx(5)
    assert connection.prev_length == pytest.approx(5)
    assert (connection.low_coeff, connection.high_coeff, connection.damping) == (1.0, 2.0, 0.1)
    assert b.links == []


def test_reset_replaces_state_and_clears_force():
    point = MassPoint(1.0, Point3D(1, 1, 1), Vector3D(1, 1, 1))
    point.add_external_force(Vector3D(5, 5, 5))
    point.reset(4.0, Point3D(7, 8, 9), Vector3D(-1, 0, 1))
    assert point.mass == 4.0
    assert tuple(point.position) == (7, 8, 9)
    assert tuple(point.velocity) == (-1, 0, 1)
    assert tuple(point.force) == (0, 0, 0)


def test_clone_is_independent_but_shares_partners():
    a = MassPoint(1.0, Point3D(0, 0, 0), Vector3D(1, 0, 0))
    b = MassPoint(1.0, Point3D(1, 0, 0))
    a.link(b, 1.0, 1.0, 0.0)
    copy = a.clone()
    copy.position.x = 50
    copy.velocity.y = 9
    copy.links[0].curr_length = 42
    assert a.position.x == 0
    assert a.velocity.y == 0
    assert a.links[0].curr_length == pytest.approx(1)
    assert copy.links[0].other is b
    assert copy.mass == a.mass