"""
Core math modules для decimal_core

Беззнаковые примитивы над векторами десятичных цифр.
Знаковая арифметика: src.decimal_core.math.arithmetic.
"""

from src.decimal_core.math.digits import (
    # Constants
    DIGIT_BASE,
    MAX_DIGIT,
    ZERO_MAGNITUDE,
    # Types
    Magnitude,
    # Canonical form
    is_zero_magnitude,
    pad_magnitude,
    strip_magnitude,
    # Shifts
    shift_left,
    shift_right,
    # Comparison
    compare_magnitudes,
    # Add / subtract / multiply
    add_magnitudes,
    multiply_by_repeated_addition,
    multiply_schoolbook,
    subtract_magnitudes,
)

__all__ = [
    # Constants
    "DIGIT_BASE",
    "MAX_DIGIT",
    "ZERO_MAGNITUDE",
    # Types
    "Magnitude",
    # Canonical form
    "is_zero_magnitude",
    "pad_magnitude",
    "strip_magnitude",
    # Shifts
    "shift_left",
    "shift_right",
    # Comparison
    "compare_magnitudes",
    # Add / subtract / multiply
    "add_magnitudes",
    "multiply_by_repeated_addition",
    "multiply_schoolbook",
    "subtract_magnitudes",
]
