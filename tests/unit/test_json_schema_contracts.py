"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора DecimalValue:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/minItems)
- Интеграция с Pydantic моделью
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.decimal_core.contracts import (
    DecimalValueValidator,
    SchemaLoader,
    load_decimal_value,
    validate_decimal_value,
)
from src.decimal_core.domain import decimal


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_decimal_value():
    """Валидный payload для -12.034"""
    return {
        "sign": True,
        "integer_digits": [1, 2],
        "fractional_digits": [0, 3, 4],
    }


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


def test_schema_loader_loads_decimal_value_schema():
    """Схема загружается и проходит meta-validation"""
    loader = SchemaLoader()
    schema = loader.load_schema("decimal_value")
    assert schema["title"] == "DecimalValue"
    assert set(schema["required"]) == {"sign", "integer_digits", "fractional_digits"}


def test_schema_loader_caches_schemas():
    """Повторная загрузка возвращает тот же объект"""
    loader = SchemaLoader()
    first = loader.load_schema("decimal_value")
    second = loader.load_schema("decimal_value")
    assert first is second


def test_schema_loader_raises_on_missing_schema():
    """Отсутствующая схема → FileNotFoundError"""
    loader = SchemaLoader()
    with pytest.raises(FileNotFoundError, match="Schema not found"):
        loader.load_schema("nonexistent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path: Path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path: Path):
    """Невалидная JSON Schema → ValueError"""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)
    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


# =============================================================================
# DECIMAL VALUE VALIDATION TESTS
# =============================================================================


def test_decimal_value_validator_accepts_valid_data(valid_decimal_value):
    validator = DecimalValueValidator()
    validator.validate(valid_decimal_value)
    assert validator.is_valid(valid_decimal_value)


def test_decimal_value_validate_function(valid_decimal_value):
    validate_decimal_value(valid_decimal_value)


@pytest.mark.parametrize("field", ["sign", "integer_digits", "fractional_digits"])
def test_decimal_value_rejects_missing_required_field(valid_decimal_value, field):
    del valid_decimal_value[field]
    with pytest.raises(ValidationError) as exc_info:
        validate_decimal_value(valid_decimal_value)
    assert field in str(exc_info.value)


def test_decimal_value_rejects_wrong_sign_type(valid_decimal_value):
    valid_decimal_value["sign"] = "negative"
    with pytest.raises(ValidationError):
        validate_decimal_value(valid_decimal_value)


def test_decimal_value_rejects_empty_digits(valid_decimal_value):
    valid_decimal_value["fractional_digits"] = []
    with pytest.raises(ValidationError):
        validate_decimal_value(valid_decimal_value)


@pytest.mark.parametrize("digit", [10, -1])
def test_decimal_value_rejects_out_of_range_digit(valid_decimal_value, digit):
    valid_decimal_value["integer_digits"] = [1, digit]
    with pytest.raises(ValidationError):
        validate_decimal_value(valid_decimal_value)


def test_decimal_value_rejects_non_integer_digit(valid_decimal_value):
    valid_decimal_value["integer_digits"] = ["1"]
    with pytest.raises(ValidationError):
        validate_decimal_value(valid_decimal_value)


def test_decimal_value_rejects_additional_properties(valid_decimal_value):
    valid_decimal_value["scale"] = 3
    with pytest.raises(ValidationError):
        validate_decimal_value(valid_decimal_value)


def test_iter_errors_reports_all_violations():
    errors = list(DecimalValueValidator().iter_errors({"sign": 1, "integer_digits": []}))
    assert len(errors) == 3  # sign type, minItems, missing fractional_digits


# =============================================================================
# PYDANTIC INTEGRATION TESTS
# =============================================================================


def test_model_dump_satisfies_contract():
    """Сериализованный DecimalValue проходит контракт"""
    for text in ["0", "-12.034", "0007.500", "-0.0"]:
        validate_decimal_value(decimal(text).model_dump(mode="json"))


def test_load_decimal_value(valid_decimal_value):
    value = load_decimal_value(valid_decimal_value)
    assert value == decimal("-12.034")
    assert value.integer_digits == (1, 2)


def test_load_decimal_value_keeps_raw_digits():
    """Загрузка не канонизирует цифры"""
    value = load_decimal_value(
        {"sign": False, "integer_digits": [0, 0, 7], "fractional_digits": [5, 0]}
    )
    assert value.integer_digits == (0, 0, 7)
    assert value == decimal("7.5")


def test_load_decimal_value_rejects_invalid_payload(valid_decimal_value):
    valid_decimal_value["integer_digits"] = [12]
    with pytest.raises(ValidationError):
        load_decimal_value(valid_decimal_value)
