"""Closest fraction under a denominator bound, via continued fractions.

Given a proper fraction x = n/d whose denominator does not fit the storage
format, find p/q with q <= B minimizing |x - p/q|.

Write x = [a_0; a_1, a_2, ...] and let h_k/k_k be its convergents:
    h_k = a_k·h_{k-1} + h_{k-2},    k_k = a_k·k_{k-1} + k_{k-2}
with h_{-1}/k_{-1} = 1/0 and h_{-2}/k_{-2} = 0/1.

The best approximation with denominator <= B is either the last convergent
with k_k <= B, or a semiconvergent
    (a·h_{k-1} + h_{k-2}) / (a·k_{k-1} + k_{k-2}),   ceil(a_k/2) <= a < a_k
built from the first convergent that exceeds the bound. For a > a_k/2 the
semiconvergent always wins; for a == a_k/2 it has to be compared exactly.
"""

from __future__ import annotations
from typing import Tuple

from arithmetic import Q

# Once the replacement search is narrowed to this many candidates, scan them.
SCAN_WINDOW = 8

def _largest_admissible_term(lo: int, hi: int, k1: int, k0: int, bound: int) -> int:
    """
    Largest a in [lo, hi) with a·k1 + k0 <= bound.
    Requires lo admissible and hi not.
    """
    def admissible(a: int) -> bool:
        return a * k1 + k0 <= bound

    # invariant: admissible(lo) and not admissible(hi)
    while hi - lo > SCAN_WINDOW:
        mid = (lo + hi) // 2
        if admissible(mid):
            lo = mid
        else:
            hi = mid
    for a in range(hi - 1, lo - 1, -1):
        if admissible(a):
            return a
    return lo

def _closer_or_equal(p1: int, q1: int, p2: int, q2: int, target: Q) -> bool:
    """True if p1/q1 is at least as close to target as p2/q2."""
    return abs(Q(p1, q1) - target) <= abs(Q(p2, q2) - target)

def best_approximation(num: int, den: int, bound: int) -> Tuple[int, int]:
    """
    Closest fraction p/q to num/den with 0 < q <= bound.

    Args:
        num: numerator, |num| < den
        den: denominator, > 0
        bound: largest admissible denominator, >= 1

    Returns:
        (p, q) in lowest terms, p carrying the sign of num
    """
    if den <= 0:
        raise ValueError(f"best_approximation: denominator must be positive, got {den}")
    if abs(num) >= den:
        raise ValueError(f"best_approximation: {num}/{den} is not a proper fraction")
    if bound < 1:
        raise ValueError(f"best_approximation: bound must be at least 1, got {bound}")

    negative = num < 0
    target = Q(abs(num), den)

    # (h0, k0) = previous-but-one convergent, (h1, k1) = previous convergent
    h0, k0 = 0, 1
    h1, k1 = 1, 0
    best = (0, 1)
    found = False

    x_num, x_den = abs(num), den
    while x_den != 0:
        a, r = divmod(x_num, x_den)
        h2, k2 = a * h1 + h0, a * k1 + k0

        if k2 > bound:
            # (h1, k1) is the last admissible convergent
            lo = (a + 1) // 2
            if lo * k1 + k0 <= bound:
                t = _largest_admissible_term(lo, a, k1, k0, bound)
                hs, ks = t * h1 + h0, t * k1 + k0
                if 2 * t != a or _closer_or_equal(hs, ks, best[0], best[1], target):
                    best = (hs, ks)
                    found = True
            break

        best = (h2, k2)
        found = True
        h0, k0, h1, k1 = h1, k1, h2, k2
        x_num, x_den = x_den, r

    if not found:
        # unreachable for proper input: a_0 = 0 gives the convergent 0/1
        best = (0, 1)

    p, q = best
    return (-p if negative else p), q
