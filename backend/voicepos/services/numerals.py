# Overview: Bengali digit formatting used in generated transaction descriptions.

from __future__ import annotations

BENGALI_DIGITS = "০১২৩৪৫৬৭৮৯"

_TO_BENGALI = str.maketrans("0123456789", BENGALI_DIGITS)
_FROM_BENGALI = str.maketrans(BENGALI_DIGITS, "0123456789")


def to_bengali_digits(value) -> str:
    """
    Replace every ASCII digit with its Bengali glyph.

    Anything that is not a digit (minus sign, decimal point) passes through
    unchanged. Whole floats such as 2.0 are written without the ".0".
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).translate(_TO_BENGALI)


def from_bengali_digits(text: str) -> str:
    return text.translate(_FROM_BENGALI)
