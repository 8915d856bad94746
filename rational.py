"""Exact mixed-number rationals stored as fixed-width (64-bit) integers.

A Rational is the triple (whole, num, den) read as whole + num/den. Every
value is kept canonical:
    den > 0
    num == 0  =>  den == 1
    num != 0  =>  0 < |num| < den, gcd(|num|, den) == 1
    sign(whole) · sign(num) >= 0
so two Rationals are equal exactly when their components are.

Operations compute in Python ints (arbitrary precision), normalize, and only
then narrow each component back to 64 bits:
    - whole part out of range        -> RationalOverflowError
    - numerator/denominator too big  -> RationalUnderflowError, carrying the
      closest Rational whose fraction part fits
"""

from __future__ import annotations
from dataclasses import dataclass
from operator import index
from typing import Tuple, Union, final

from arithmetic import Triple, is_normalized, normalize
from approximation import best_approximation
from decimals import RoundingMode, render_decimal
from formats import INT64
from overflow import RationalOverflowError, RationalUnderflowError, narrow

FMT = INT64  # storage format of every component


def _as_int(x, what: str) -> int:
    # accepts int and numpy integer scalars; floats are rejected on purpose
    try:
        return index(x)
    except TypeError:
        raise TypeError(f"{what} must be an integer, got {type(x).__name__}") from None


def _finalize(whole: int, num: int, den: int) -> Triple:
    """Narrow a normalized triple to the storage format."""
    whole = narrow(whole, FMT)
    try:
        return whole, narrow(num, FMT), narrow(den, FMT)
    except RationalOverflowError as e:
        # |num| < den, so the magnitude fits; only the precision does not
        approx_num, approx_den = best_approximation(num, den, FMT.max)
        w, n, d = normalize(whole, approx_num, approx_den)
        approx = Rational(narrow(w, FMT), n, d)
        raise RationalUnderflowError(e.value, approx, FMT) from None


def _create(whole: int, num: int, den: int) -> Rational:
    return Rational(*_finalize(*normalize(whole, num, den)))


# Raw operations on triples. They stay in arbitrary precision so that a
# compound operation (sub, div) narrows only its final result.

def _add_raw(a: Triple, b: Triple) -> Triple:
    # (a + b/c) + (d + e/f) = (a + d) + (b·f + e·c)/(c·f)
    (w1, n1, d1), (w2, n2, d2) = a, b
    return w1 + w2, n1 * d2 + n2 * d1, d1 * d2


def _mul_raw(a: Triple, b: Triple) -> Triple:
    # (a + b/c)(d + e/f) = a·d + (a·e·c + d·b·f + b·e)/(c·f)
    (w1, n1, d1), (w2, n2, d2) = a, b
    return w1 * w2, w1 * n2 * d1 + w2 * n1 * d2 + n1 * n2, d1 * d2


def _recip_raw(a: Triple) -> Triple:
    # 1 / (a + b/c) = c / (a·c + b)
    w, n, d = a
    new_den = w * d + n
    if new_den == 0:
        raise ZeroDivisionError("reciprocal of zero")
    return normalize(0, d, new_den)


@final
@dataclass(frozen=True)
class Rational:
    """
    Immutable mixed number whole + num/den.

    Build instances with the factories (zero, one, from_whole, from_fraction,
    from_whole_and_fraction). The constructor does not normalize; it rejects
    triples that are not already canonical and in range.
    """
    whole: int
    num: int = 0
    den: int = 1

    def __post_init__(self):
        if not all(FMT.contains(x) for x in (self.whole, self.num, self.den)):
            raise ValueError(f"({self.whole}, {self.num}, {self.den}) does not fit the {FMT.name} format")
        if not is_normalized(self.whole, self.num, self.den):
            raise ValueError(
                f"({self.whole}, {self.num}, {self.den}) is not canonical; use Rational.from_whole_and_fraction"
            )

    def _triple(self) -> Triple:
        return self.whole, self.num, self.den

    # ==========================================================================
    # Factories
    # ==========================================================================

    @classmethod
    def zero(cls) -> Rational:
        return cls.from_whole(0)

    @classmethod
    def one(cls) -> Rational:
        return cls.from_whole(1)

    @classmethod
    def from_whole(cls, value: int) -> Rational:
        return cls(narrow(_as_int(value, "whole"), FMT))

    @classmethod
    def from_fraction(cls, num: int, den: int) -> Rational:
        return _create(0, _as_int(num, "num"), _as_int(den, "den"))

    @classmethod
    def from_whole_and_fraction(cls, whole: int, num: int, den: int) -> Rational:
        return _create(_as_int(whole, "whole"), _as_int(num, "num"), _as_int(den, "den"))

    # ==========================================================================
    # Accessors and predicates
    # ==========================================================================

    def whole_part(self) -> int:
        return self.whole

    def fraction_part(self) -> Tuple[int, int]:
        return self.num, self.den

    def is_zero(self) -> bool:
        return self.whole == 0 and self.num == 0

    def is_positive(self) -> bool:
        return self.whole > 0 or self.num > 0

    def is_negative(self) -> bool:
        return self.whole < 0 or self.num < 0

    def is_zero_or_positive(self) -> bool:
        return not self.is_negative()

    def is_zero_or_negative(self) -> bool:
        return not self.is_positive()

    def is_whole(self) -> bool:
        return self.num == 0

    def is_integer(self) -> bool:
        return self.is_whole()

    def to_int_exact(self) -> int:
        if not self.is_whole():
            raise ValueError(f"{self.whole} {self.num}/{self.den} is not a whole number")
        return self.whole

    # ==========================================================================
    # Comparison
    # ==========================================================================

    def equals(self, other: Rational) -> bool:
        return self.whole == other.whole and self.num == other.num and self.den == other.den

    def compare(self, other: Rational) -> int:
        """-1, 0 or 1 as self is less than, equal to or greater than other."""
        if self.whole != other.whole:
            return -1 if self.whole < other.whole else 1
        # both fraction parts lie in (-1, 1); cross-multiply instead of dividing
        lhs = self.num * other.den
        rhs = other.num * self.den
        return (lhs > rhs) - (lhs < rhs)

    # ==========================================================================
    # Arithmetic
    # ==========================================================================

    def add(self, other: Rational) -> Rational:
        return _create(*_add_raw(self._triple(), other._triple()))

    def sub(self, other: Rational) -> Rational:
        """
        self - other, narrowed once. The negation of other is never stored,
        so subtracting the most negative value does not overflow on its own.
        """
        w, n, d = other._triple()
        return _create(*_add_raw(self._triple(), (-w, -n, d)))

    def mul(self, other: Rational) -> Rational:
        return _create(*_mul_raw(self._triple(), other._triple()))

    def div(self, other: Rational) -> Rational:
        """
        self / other, narrowed once. The reciprocal of other is kept exact,
        so the result (or the approximation an underflow carries) is that of
        the true quotient.
        """
        return _create(*_mul_raw(self._triple(), _recip_raw(other._triple())))

    def recip(self) -> Rational:
        return _create(*_recip_raw(self._triple()))

    def _check_negatable(self) -> None:
        if self.whole == FMT.min:
            raise RationalOverflowError(-self.whole, FMT)
        if self.num == FMT.min:
            raise RationalOverflowError(-self.num, FMT)

    def neg(self) -> Rational:
        self._check_negatable()
        # flipping both signs keeps every invariant
        return Rational(-self.whole, -self.num, self.den)

    def abs(self) -> Rational:
        self._check_negatable()
        return Rational(abs(self.whole), abs(self.num), self.den)

    # ==========================================================================
    # Rendering
    # ==========================================================================

    def to_decimal_string(self, max_decimals: int, min_decimals: int = 0,
                          mode: Union[RoundingMode, str] = RoundingMode.ROUND_HALF_UP) -> str:
        return render_decimal(self.whole, self.num, self.den, max_decimals, min_decimals, mode)

    # ==========================================================================
    # Operators
    # ==========================================================================

    def __add__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.div(other)

    def __neg__(self):
        return self.neg()

    def __abs__(self):
        return self.abs()

    def __lt__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        if self.num == 0:
            return str(self.whole)
        if self.whole == 0:
            return f"{self.num}/{self.den}"
        return f"{self.whole} {abs(self.num)}/{self.den}"
