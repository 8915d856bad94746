from math import floor, gcd

import pytest
from hypothesis import given, strategies as st

from approximation import best_approximation
from arithmetic import Q
from formats import get_int_format

def brute_force_distance(num: int, den: int, bound: int) -> Q:
    """Smallest |num/den - p/q| over all q <= bound."""
    x = Q(num, den)
    best = None
    for q in range(1, bound + 1):
        p = floor(x * q)
        for cand in (p, p + 1):
            dist = abs(Q(cand, q) - x)
            if best is None or dist < best:
                best = dist
    return best

@st.composite
def bounded_problems(draw, max_bound=64, max_den=5000):
    bound = draw(st.integers(min_value=1, max_value=max_bound))
    den = draw(st.integers(min_value=bound + 1, max_value=max_den))
    num = draw(st.integers(min_value=-(den - 1), max_value=den - 1))
    return num, den, bound

@given(bounded_problems())
def test_matches_brute_force(problem):
    num, den, bound = problem
    p, q = best_approximation(num, den, bound)
    assert 1 <= q <= bound
    assert gcd(p, q) == 1
    assert abs(Q(p, q) - Q(num, den)) == brute_force_distance(num, den, bound)

@given(bounded_problems(max_bound=get_int_format("int8").max, max_den=10 ** 6))
def test_matches_brute_force_int8_bound(problem):
    num, den, bound = problem
    p, q = best_approximation(num, den, bound)
    assert q <= bound
    assert abs(Q(p, q) - Q(num, den)) == brute_force_distance(num, den, bound)

@given(st.integers(min_value=2, max_value=10 ** 40), st.data())
def test_matches_limit_denominator_on_large_inputs(den, data):
    num = data.draw(st.integers(min_value=-(den - 1), max_value=den - 1))
    bound = data.draw(st.integers(min_value=1, max_value=den))
    x = Q(num, den)
    p, q = best_approximation(num, den, bound)
    assert q <= bound
    assert abs(Q(p, q) - x) == abs(x.limit_denominator(bound) - x)

def test_sign_is_preserved():
    assert best_approximation(-2, 5, 4) == (-1, 3)
    assert best_approximation(2, 5, 4) == (1, 3)

def test_exact_when_denominator_fits():
    assert best_approximation(3, 7, 7) == (3, 7)
    assert best_approximation(6, 14, 100) == (3, 7)
    assert best_approximation(0, 99, 5) == (0, 1)

def test_half_term_semiconvergent():
    # 2/5 = [0; 2, 2]; with q <= 4 the semiconvergent 1/3 beats the convergent 1/2
    assert best_approximation(2, 5, 4) == (1, 3)

def test_large_final_term_uses_search():
    # [0; 1, 10^12]: convergents 0/1, 1/1, then the semiconvergents t/(t+1)
    bound = 9 * 10 ** 11
    p, q = best_approximation(10 ** 12, 10 ** 12 + 1, bound)
    assert (p, q) == (bound - 1, bound)
    assert Q(p, q) == Q(10 ** 12, 10 ** 12 + 1).limit_denominator(bound)

def test_semiconvergent_below_half_falls_back_to_convergent():
    # 1/2^64 = [0; 2^64]; no semiconvergent fits under 2^63 - 1
    bound = 2 ** 63 - 1
    assert best_approximation(1, 2 ** 64, bound) == (0, 1)
    # (2^64 - 1)/2^64 rounds to the whole unit
    assert best_approximation(2 ** 64 - 1, 2 ** 64, bound) == (1, 1)

def test_invalid_input():
    with pytest.raises(ValueError):
        best_approximation(1, 0, 10)
    with pytest.raises(ValueError):
        best_approximation(5, 4, 10)
    with pytest.raises(ValueError):
        best_approximation(1, 4, 0)
