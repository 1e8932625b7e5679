"""Conversion routines for additive and positional numeral systems."""

from .additive import convert_additive
from .engine import ensure_non_negative_int, to_system
from .positional import convert_positional, digits_value, highest_power
from .zero import UNREPRESENTABLE_TEXT, zero_result

__all__ = [
    "UNREPRESENTABLE_TEXT",
    "convert_additive",
    "convert_positional",
    "digits_value",
    "ensure_non_negative_int",
    "highest_power",
    "to_system",
    "zero_result",
]
