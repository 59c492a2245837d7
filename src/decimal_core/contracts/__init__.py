"""
Contract Validation Module

Валидация JSON payload сериализованных DecimalValue.
"""

from .validators import (
    ContractValidator,
    DecimalValueValidator,
    SchemaLoader,
    load_decimal_value,
    validate_decimal_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalValueValidator",
    # Functions
    "validate_decimal_value",
    "load_decimal_value",
]
