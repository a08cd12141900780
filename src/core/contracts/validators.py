"""
JSON Schema Contract Validators

Модуль для валидации plain-записей, которыми внешние модули (DOM, canvas,
storage) обмениваются с ядром, согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- interval.json      ([start, end])
- interval_set.json  ([[start, end], ...])
- coord.json         ({x, y})
- rect.json          ({x, y, w, h})
- vector.json        ({length, angle})
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с пакетом contracts и
    устанавливаются вместе с ним как package data.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'rect')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

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


class IntervalValidator(ContractValidator):
    """Валидатор для interval контракта."""

    def __init__(self):
        super().__init__("interval")


class IntervalSetValidator(ContractValidator):
    """Валидатор для interval_set контракта."""

    def __init__(self):
        super().__init__("interval_set")


class CoordValidator(ContractValidator):
    """Валидатор для coord контракта."""

    def __init__(self):
        super().__init__("coord")


class RectValidator(ContractValidator):
    """Валидатор для rect контракта."""

    def __init__(self):
        super().__init__("rect")


class VectorValidator(ContractValidator):
    """Валидатор для vector контракта."""

    def __init__(self):
        super().__init__("vector")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_interval(data: Any) -> None:
    """
    Валидация interval записи.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    IntervalValidator().validate(data)


def validate_interval_set(data: Any) -> None:
    """
    Валидация interval_set записи.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    IntervalSetValidator().validate(data)


def validate_coord(data: Dict[str, Any]) -> None:
    """
    Валидация coord записи.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CoordValidator().validate(data)


def validate_rect(data: Dict[str, Any]) -> None:
    """
    Валидация rect записи.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RectValidator().validate(data)


def validate_vector(data: Dict[str, Any]) -> None:
    """
    Валидация vector записи.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    VectorValidator().validate(data)

