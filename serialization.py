from typing import Optional

from arithmetic import is_normalized
from rational import Rational

# "<whole>:<num>:<den>". A 64-bit integer takes at most 19 digits plus a sign,
# so three fields and two separators fit in 62 characters.
SEPARATOR = ":"
MAX_STRING_LENGTH = 64
ALLOWED_CHARS = set("0123456789-" + SEPARATOR)

class ParseError(ValueError):
    pass

def serialize(value: Optional[Rational]) -> Optional[str]:
    if value is None:
        return None
    num, den = value.fraction_part()
    return f"{value.whole_part()}{SEPARATOR}{num}{SEPARATOR}{den}"

def parse_field(s: str, idx: int) -> int:
    i = 0
    n = len(s)
    # optional leading '-'
    if i < n and s[i] == '-':
        i += 1
    if i >= n:
        raise ParseError(f"Field {idx}: expected digits, got {s!r}")
    while i < n and s[i].isdigit():
        i += 1
    if i != n:
        raise ParseError(f"Field {idx}: unexpected character {s[i]!r} at position {i}")
    return int(s)

def parse_triple(s: str):
    if len(s) > MAX_STRING_LENGTH:
        raise ParseError(f"Serialized rational is {len(s)} characters long, at most {MAX_STRING_LENGTH} are allowed")
    if any(c not in ALLOWED_CHARS for c in s):
        bad = sorted(set(c for c in s if c not in ALLOWED_CHARS))
        raise ParseError(f"Illegal character(s) found: {bad}. Allowed are only 0-9 - {SEPARATOR}")
    fields = s.split(SEPARATOR)
    if len(fields) != 3:
        raise ParseError(f"Expected 3 fields separated by '{SEPARATOR}', got {len(fields)}")
    whole, num, den = (parse_field(f, idx) for idx, f in enumerate(fields))
    return whole, num, den

def unserialize(s: Optional[str]) -> Optional[Rational]:
    if s is None:
        return None
    whole, num, den = parse_triple(s)
    value = Rational.from_whole_and_fraction(whole, num, den)
    if not is_normalized(whole, num, den):
        print(f"WARNING: serialized rational '{s}' is not in canonical form.")
        print(f"WARNING: Normalized to '{serialize(value)}'.")
    return value
