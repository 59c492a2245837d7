"""
JSON Schema Contract Validators

Модуль для валидации сериализованных DecimalValue согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema.

Схемы (каталог schema/ рядом с модулем):
- decimal_value.json: {"sign", "integer_digits", "fractional_digits"}

Payload получается через DecimalValue.model_dump(mode="json").
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.decimal_core.domain.decimal_value import DecimalValue


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'decimal_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class DecimalValueValidator(ContractValidator):
    """Валидатор для decimal_value контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("decimal_value", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_decimal_value(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного DecimalValue.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    DecimalValueValidator().validate(data)


def load_decimal_value(data: Dict[str, Any]) -> DecimalValue:
    """
    Восстановление DecimalValue из payload после проверки контракта.

    Значение возвращается как есть, без канонизации.

    Raises:
        jsonschema.ValidationError: Если payload не соответствует схеме
    """
    validate_decimal_value(data)
    return DecimalValue.model_validate(data)
