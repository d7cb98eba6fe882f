"""Bengali digit formatting."""

import pytest

from voicepos.services.numerals import to_bengali_digits, from_bengali_digits, BENGALI_DIGITS


def test_each_digit_maps_to_its_glyph():
    assert to_bengali_digits(1234567890) == "১২৩৪৫৬৭৮৯০"


def test_zero():
    assert to_bengali_digits(0) == "০"


def test_negative_sign_passes_through():
    assert to_bengali_digits(-250) == "-২৫০"


def test_whole_float_drops_decimal_part():
    assert to_bengali_digits(2.0) == "২"


def test_fractional_float_keeps_point():
    assert to_bengali_digits(2.5) == "২.৫"


def test_output_contains_only_bengali_digits():
    assert set(to_bengali_digits(9876543210)) <= set(BENGALI_DIGITS)


@pytest.mark.parametrize("n", [0, 7, 10, 99, 110, 750, 1000, 31415926, 10 ** 12])
def test_round_trip(n):
    assert from_bengali_digits(to_bengali_digits(n)) == str(n)


def test_round_trip_range():
    for n in range(0, 2000, 7):
        assert from_bengali_digits(to_bengali_digits(n)) == str(n)
