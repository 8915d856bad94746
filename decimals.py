from __future__ import annotations
from enum import Enum
from typing import Union

from arithmetic import tdiv

class RoundingMode(Enum):
    CEIL = "ceil"                        # toward +infinity
    FLOOR = "floor"                      # toward -infinity
    ROUND_HALF_UP = "round_half_up"      # nearest, ties away from zero
    ROUND_HALF_DOWN = "round_half_down"  # nearest, ties toward zero

def to_rounding_mode(mode: Union[RoundingMode, str]) -> RoundingMode:
    if isinstance(mode, RoundingMode):
        return mode
    if isinstance(mode, str):
        key = mode.upper()
        if key in RoundingMode.__members__:
            return RoundingMode[key]
        try:
            return RoundingMode(mode.lower())
        except ValueError:
            pass
    raise ValueError(f"Unrecognized rounding mode {mode!r}. Supported modes {[m.name for m in RoundingMode]}")

def check_decimals(max_decimals: int, min_decimals: int) -> None:
    if min_decimals < 0:
        raise ValueError("The number of decimals cannot be negative")
    if max_decimals < min_decimals:
        raise ValueError("The minimum number of decimals cannot be larger than the maximum number of decimals")

def divide_rounded(n: int, d: int, mode: RoundingMode) -> int:
    """
    n / d rounded to an integer according to mode (d > 0).
    """
    if mode is RoundingMode.FLOOR:
        return n // d
    if mode is RoundingMode.CEIL:
        return -((-n) // d)

    q = tdiv(n, d)
    r = n - q * d
    twice = 2 * abs(r)
    if twice < d:
        return q
    away = q + (1 if n > 0 else -1)
    if twice > d:
        return away
    # exactly half way
    return away if mode is RoundingMode.ROUND_HALF_UP else q

def render_decimal(whole: int, num: int, den: int, max_decimals: int, min_decimals: int,
                   mode: Union[RoundingMode, str]) -> str:
    """
    Exact decimal expansion of whole + num/den, rounded to max_decimals places.

    Trailing zeros of the fractional part are dropped, but at least
    min_decimals digits are kept. The sign is that of the *rounded* value,
    so -0.001 at 2 places reads "0" when rounded to nearest and "-0.01"
    when floored.
    """
    check_decimals(max_decimals, min_decimals)
    mode = to_rounding_mode(mode)

    scaled = (whole * den + num) * 10 ** max_decimals
    rounded = divide_rounded(scaled, den, mode)

    digits = str(abs(rounded))
    if max_decimals > 0:
        digits = digits.rjust(max_decimals + 1, "0")
        int_part = digits[:-max_decimals]
        frac_part = digits[-max_decimals:]
    else:
        int_part, frac_part = digits, ""

    # strip trailing zeros, keeping at least min_decimals digits
    keep = len(frac_part.rstrip("0"))
    frac_part = frac_part[:max(keep, min_decimals)]

    sign = "-" if rounded < 0 else ""
    if frac_part:
        return f"{sign}{int_part}.{frac_part}"
    return f"{sign}{int_part}"
