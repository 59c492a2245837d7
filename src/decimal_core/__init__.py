"""
Arbitrary-precision signed decimal arithmetic.

Parsing, canonicalization, comparison, addition, subtraction and
multiplication over digit vectors of unbounded length.
"""

from src.decimal_core.domain import (
    DecimalParseError,
    DecimalValue,
    ParseFailureReason,
    decimal,
    parse,
)
from src.decimal_core.math.arithmetic import (
    ArithmeticConfig,
    DecimalArithmetic,
    MultiplicationStrategy,
    Ordering,
    absolute,
    add,
    compare,
    equals,
    multiply,
    negate,
    subtract,
)

__all__ = [
    # Model
    "DecimalValue",
    # Parsing
    "DecimalParseError",
    "ParseFailureReason",
    "decimal",
    "parse",
    # Arithmetic
    "ArithmeticConfig",
    "DecimalArithmetic",
    "MultiplicationStrategy",
    "Ordering",
    "absolute",
    "add",
    "compare",
    "equals",
    "multiply",
    "negate",
    "subtract",
]
