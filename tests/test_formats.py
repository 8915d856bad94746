import numpy as np
import pytest

from formats import INT64, get_int_format

def test_int64_bounds():
    assert INT64.bits == 64
    assert INT64.min == -(2 ** 63)
    assert INT64.max == 2 ** 63 - 1
    assert type(INT64.max) is int

def test_lookup_is_case_insensitive_and_defaults_to_int64():
    assert get_int_format("INT64") == INT64
    assert get_int_format(None) == INT64
    assert get_int_format("") == INT64

def test_int8_matches_numpy():
    fmt = get_int_format("int8")
    assert fmt.bits == 8
    assert fmt.min == np.iinfo(np.int8).min
    assert fmt.max == np.iinfo(np.int8).max

def test_contains():
    fmt = get_int_format("int8")
    assert fmt.contains(-128)
    assert fmt.contains(127)
    assert not fmt.contains(128)
    assert not fmt.contains(-129)

@pytest.mark.parametrize("name", ["int16", "int32", "long", "int128"])
def test_unknown_format(name):
    with pytest.raises(NotImplementedError):
        get_int_format(name)
