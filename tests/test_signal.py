import pytest

from darkflame.signal import Level, Signal


def test_limits_are_32_bit():
    assert (Signal(Signal.MAX) + Signal(5)).value == 0x7FFFFFFF
    assert (Signal(-(2**31) + 1) - Signal(5)).value == -(2**31)


def test_default_signal_is_zero():
    assert Signal().value == 0


def test_positive_addition():
    assert (Signal(2) + Signal(3)).value == 5


def test_addition_saturates_at_max():
    assert (Signal(Signal.MAX) + Signal(1)).value == Signal.MAX
    assert (Signal(Signal.MAX - 10) + Signal(100)).value == Signal.MAX


def test_addition_of_non_positive_yields_max():
    assert (Signal(10) + Signal(0)).value == Signal.MAX
    assert (Signal(10) + Signal(-3)).value == Signal.MAX


def test_positive_subtraction():
    a = Signal(100)
    b = Signal(40)
    assert ((a - b) + b).value == a.value


def test_subtraction_saturates_at_min():
    assert (Signal(Signal.MIN) - Signal(1)).value == Signal.MIN
    assert (Signal(Signal.MIN + 5) - Signal(100)).value == Signal.MIN


def test_negation_round_trip():
    s = Signal(12345)
    assert (-(-s)).value == s.value
    assert (-s).value == -s.value


def test_negating_min_wraps_to_min():
    assert (-Signal(Signal.MIN)).value == Signal.MIN


def test_signal_is_immutable():
    s = Signal(1)
    with pytest.raises(AttributeError):
        s.value = 2  # type: ignore[misc]
    assert s.value == 1


def test_level_bounds_and_default():
    assert Level.MIN == 0.0
    assert Level.MAX == 1.0
    assert Level().value == Level.MIN
    assert Level(0.5).value == 0.5