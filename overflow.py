from __future__ import annotations
from typing import TYPE_CHECKING

from formats import IntFormat, INT64

if TYPE_CHECKING:
    from rational import Rational


class RationalOverflowError(OverflowError):
    """The whole part (or a negated component) does not fit the fixed-width format.

    Carries the exact out-of-range value. Nothing can be salvaged: the
    magnitude itself is unrepresentable.
    """

    def __init__(self, value: int, fmt: IntFormat = INT64):
        super().__init__(
            f"Overflow error: value {value} is too large to be represented by a {fmt.bits}-bit integer"
        )
        self.value = value


class RationalUnderflowError(ArithmeticError):
    """The numerator or denominator does not fit, but the whole part does.

    The value is in range, only its precision is not. ``closest_approximation``
    holds the nearest Rational whose fraction part fits, so callers can opt
    into the reduced precision instead of giving up.
    """

    def __init__(self, value: int, closest_approximation: Rational, fmt: IntFormat = INT64):
        super().__init__(
            f"Underflow error: value {value} is too large to be represented by a {fmt.bits}-bit integer"
        )
        self.value = value
        self.closest_approximation = closest_approximation


def narrow(x: int, fmt: IntFormat = INT64) -> int:
    """Return x unchanged if it fits ``fmt``, otherwise raise RationalOverflowError(x)."""
    if fmt.contains(x):
        return int(x)
    raise RationalOverflowError(x, fmt)
