"""Tests for permissive numeric helpers"""

import math

import pytest

from geo_regions.utils import float_or_zero, hundredths, trunc_int


@pytest.mark.parametrize("text, expected", [
    ("10", 10.0),
    ("-10.5", -10.5),
    ("  +3", 3.0),
    (".5", 0.5),
    ("5.", 5.0),
    ("1e3", 1000.0),
    ("1e", 1.0),
    ("12abc", 12.0),
    ("abc", 0.0),
    ("", 0.0),
    ("-", 0.0),
    (None, 0.0),
    (7, 7.0),
])
def test_float_or_zero(text, expected):
    assert float_or_zero(text) == expected


def test_float_or_zero_special_values():
    assert float_or_zero("inf") == math.inf
    assert float_or_zero("-Infinity") == -math.inf
    assert math.isnan(float_or_zero("nan"))


def test_trunc_int():
    assert trunc_int(-3.9) == -3
    assert trunc_int(3.9) == 3
    assert trunc_int(math.inf) == 0


def test_hundredths():
    assert hundredths(40.25) == 25
    assert hundredths(-105.5) == 50
    assert hundredths(7.0) == 0
