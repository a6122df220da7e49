"""Saturating signal values and normalised influence levels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer with two's-complement wrap."""
    return (value + 0x80000000) % 0x100000000 - 0x80000000


@dataclass(frozen=True)
class Signal:
    """A 32-bit signal or parameter value.

    Addition yields the sum only when it is greater than the left operand,
    otherwise ``MAX``; subtraction yields the difference only when it is less
    than the left operand, otherwise ``MIN``.
    """

    MAX: ClassVar[int] = 0x7FFFFFFF
    MIN: ClassVar[int] = -0x80000000

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _wrap32(int(self.value)))

    def __neg__(self) -> Signal:
        return Signal(_wrap32(-self.value))

    def __add__(self, other: Signal) -> Signal:
        result = _wrap32(self.value + other.value)
        return Signal(result if result > self.value else Signal.MAX)

    def __sub__(self, other: Signal) -> Signal:
        result = _wrap32(self.value - other.value)
        return Signal(result if result < self.value else Signal.MIN)


@dataclass(frozen=True)
class Level:
    """A potential or influence level normalised to ``[MIN, MAX]``."""

    MAX: ClassVar[float] = 1.0
    MIN: ClassVar[float] = 0.0

    value: float = 0.0