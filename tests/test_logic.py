import itertools

import pytest

from practicum.logic import (
    function_by_ones,
    function_by_zeros,
    function_minimized,
    logical_xor,
    radix_strings,
    xor_pairs,
)


def test_radix_strings_round_trip():
    result = radix_strings(2024)
    assert len(result["BIN"]) == 32
    assert int(result["BIN"], 2) == 2024
    assert int(result["OCT"], 8) == 2024
    assert int(result["HEX"], 16) == 2024


def test_radix_strings_hex_is_lower_case():
    assert radix_strings(255)["HEX"] == "ff"


def test_radix_strings_negative_one():
    result = radix_strings(-1)
    assert result["BIN"] == "1" * 32
    assert result["HEX"] == "ffffffff"


@pytest.mark.parametrize(
    "a,b,expected", [(0, 0, 0), (0, 1, 1), (1, 0, 1), (1, 1, 0), (5, 0, 1), (5, 3, 0)]
)
def test_logical_xor(a, b, expected):
    assert logical_xor(a, b) == expected


def test_xor_pairs():
    assert xor_pairs("1 0\n1 1\n0 0") == [(1, 0, 1), (1, 1, 0), (0, 0, 0)]


def test_xor_pairs_odd_count():
    with pytest.raises(ValueError):
        xor_pairs("1 0 1")


def test_xor_pairs_bad_token():
    with pytest.raises(ValueError):
        xor_pairs("1 x")


def test_three_forms_agree():
    for a, b, c in itertools.product((0, 1), repeat=3):
        assert function_by_ones(a, b, c) == function_by_zeros(a, b, c)
        assert function_by_ones(a, b, c) == function_minimized(a, b, c)


def test_true_rows_of_function():
    ones = {
        combo
        for combo in itertools.product((0, 1), repeat=3)
        if function_minimized(*combo)
    }
    assert ones == {(0, 0, 0), (0, 1, 0), (0, 1, 1), (1, 1, 1)}