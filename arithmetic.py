from __future__ import annotations
from fractions import Fraction
from math import gcd
from typing import Tuple

Q = Fraction  # rational type alias

Triple = Tuple[int, int, int]  # (whole, num, den)

def tdiv(a: int, b: int) -> int:
    """
    Integer division truncating toward zero (Python's // floors instead).
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q

def sign(x: int) -> int:
    return (x > 0) - (x < 0)

def normalize(whole: int, num: int, den: int) -> Triple:
    """
    Bring a raw mixed number whole + num/den into canonical form:
      den > 0
      num == 0  =>  den == 1
      num != 0  =>  0 < |num| < den and gcd(|num|, den) == 1
      sign(whole) * sign(num) >= 0
    The steps run in this order; only the first can fail.
    """
    if den == 0:
        raise ZeroDivisionError("division by zero in normalize")
    if den < 0:
        num, den = -num, -den

    # extract the whole part of an improper fraction
    q = tdiv(num, den)
    if q != 0:
        whole += q
        num -= q * den

    # gcd(0, den) == den, which also turns 0/den into 0/1
    g = gcd(num, den)
    if g > 1:
        num //= g
        den //= g

    # borrow or lend one unit so whole and num agree in sign
    if whole > 0 and num < 0:
        whole -= 1
        num += den
    elif whole < 0 and num > 0:
        whole += 1
        num -= den

    return whole, num, den

def is_normalized(whole: int, num: int, den: int) -> bool:
    if den <= 0:
        return False
    if num == 0:
        return den == 1
    return abs(num) < den and gcd(num, den) == 1 and sign(whole) * sign(num) >= 0

def triple_to_q(whole: int, num: int, den: int) -> Q:
    """Exact value of a mixed number as a Fraction."""
    return Q(whole * den + num, den)
