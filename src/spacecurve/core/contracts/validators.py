"""
JSON Schema Contract Validators

Модуль для валидации JSON данных на границе с потребителями движка
(CLI, GUI) согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- curve_request.json (запрос на построение кривой)
- curve_catalog.json (каталог зарегистрированных кривых)
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются как package data в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        self._schemas: dict[str, Any] = {}

    def load_schema(self, schema_name: str) -> Any:
        """
        Загрузка и meta-валидация схемы `schema_name`.json (с кэшем).

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

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

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class CurveRequestValidator(ContractValidator):
    """Валидатор для curve_request контракта."""

    def __init__(self):
        super().__init__("curve_request")


class CurveCatalogValidator(ContractValidator):
    """Валидатор для curve_catalog контракта."""

    def __init__(self):
        super().__init__("curve_catalog")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_curve_request(data: dict[str, Any]) -> None:
    """
    Валидация запроса на построение кривой.

    Args:
        data: {"curve": str, "dimension": int, "size": int}

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurveRequestValidator().validate(data)


def validate_curve_catalog(data: list[dict[str, Any]]) -> None:
    """
    Валидация каталога кривых.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurveCatalogValidator().validate(data)
