"""
Contract Validation Module

JSON Schema контракты для JSON-представления дескрипторов иконок.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    ShapeIconValidator,
    ShieldIconValidator,
    get_schema_loader,
    validate_shape_icon,
    validate_shield_icon,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ShieldIconValidator",
    "ShapeIconValidator",
    # Functions
    "get_schema_loader",
    "validate_shield_icon",
    "validate_shape_icon",
]
