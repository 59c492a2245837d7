"""
Domain models and value objects.

Contains the DecimalValue value object and its text literal parser.
"""

from src.decimal_core.domain.decimal_value import (
    ASCII_DIGITS,
    DECIMAL_POINT,
    NEGATIVE_SIGN,
    POSITIVE_SIGN,
    DecimalParseError,
    DecimalValue,
    ParseFailureReason,
    decimal,
    parse,
)

__all__ = [
    # Literal format
    "ASCII_DIGITS",
    "DECIMAL_POINT",
    "NEGATIVE_SIGN",
    "POSITIVE_SIGN",
    # Model
    "DecimalValue",
    # Parsing
    "DecimalParseError",
    "ParseFailureReason",
    "decimal",
    "parse",
]
