from decimals import RoundingMode
from rational import Rational

def group_digits(digits: str, separator: str) -> str:
    """Insert separator between groups of three digits, counted from the right."""
    if not separator:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return separator.join(groups)

def format_number(value: Rational, decimals: int, min_decimals: int = 0,
                  decimal_separator: str = ".", thousands_separator: str = ",") -> str:
    """
    Human-readable rendering: rounded half up to `decimals` places, at least
    `min_decimals` kept, integer digits grouped in threes.
      1234567 2/3, 7 decimals  -> "1,234,567.6666667"
      167/185, 3 decimals, decimal_separator=",", thousands_separator="" -> "0,903"
    """
    s = value.to_decimal_string(decimals, min_decimals, RoundingMode.ROUND_HALF_UP)
    sign = ""
    if s.startswith("-"):
        sign, s = "-", s[1:]
    int_part, _, frac_part = s.partition(".")
    out = sign + group_digits(int_part, thousands_separator)
    if frac_part:
        out += decimal_separator + frac_part
    return out
