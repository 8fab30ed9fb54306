"""
JSON Schema Contract Validators for icon descriptors

Внешний encoder сериализует дескрипторы в JSON; схемы фиксируют набор
полей, их типы и диапазоны значений.

Схемы (schema/ рядом с этим модулем, поставляются как package data):
- shield_icon.json — ShieldIconData
- shape_icon.json  — ShapeIconData
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# schema/ внутри пакета src.core.contracts
DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'shield_icon')

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

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Глобальный загрузчик (создаётся при первом обращении)."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс: валидация данных против одной JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class ShieldIconValidator(ContractValidator):
    """Валидатор для shield_icon контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("shield_icon", loader)


class ShapeIconValidator(ContractValidator):
    """Валидатор для shape_icon контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("shape_icon", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_shield_icon(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления ShieldIconData.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ShieldIconValidator().validate(data)


def validate_shape_icon(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления ShapeIconData.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ShapeIconValidator().validate(data)
