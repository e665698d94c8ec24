import pandas as pd
import pytest

from clean.damage import (
    damage_multiplier,
    normalize_damage,
    normalize_damage_columns,
    unrecognized_exponent_codes,
)


@pytest.mark.parametrize("code, multiplier", [
    ("H", 100), ("h", 100),
    ("K", 1_000), ("k", 1_000),
    ("M", 1e6), ("m", 1e6),
    ("B", 1e9), ("b", 1e9),
])
def test_known_codes_scale_magnitude(code, multiplier):
    assert normalize_damage(2.5, code) == 2.5 * multiplier


@pytest.mark.parametrize("code", ["", "0", "5", "?", "-", "+", "X", None, float("nan")])
def test_unknown_codes_leave_magnitude_unchanged(code):
    assert normalize_damage(42.0, code) == 42.0
    assert damage_multiplier(code) == 1


def test_surrounding_whitespace_is_ignored():
    assert normalize_damage(3, " K ") == 3_000


def test_columns_match_scalar_rule():
    magnitudes = pd.Series([10, 5, 2.5, 3, None, "n/a"])
    codes = pd.Series(["K", "m", "B", "?", "K", "M"])

    result = normalize_damage_columns(magnitudes, codes)

    assert result.tolist() == [10_000.0, 5_000_000.0, 2.5e9, 3.0, 0.0, 0.0]


def test_missing_codes_in_columns_default_to_one():
    result = normalize_damage_columns(pd.Series([7.0, 8.0]), pd.Series([None, ""]))
    assert result.tolist() == [7.0, 8.0]


def test_unrecognized_exponent_codes_counts_non_blank_fallbacks():
    codes = pd.Series(["K", "?", "0", "", "?", None, "h"])
    assert unrecognized_exponent_codes(codes) == {"?": 2, "0": 1}
