"""Composer — построение дескрипторов иконок из пула энтропии.

Два независимых алгоритма (shield, shape) с фиксированным порядком draws
и сервисный слой для выбора стиля и JSON-кодирования.
"""

from .service import (
    IconService,
    IconServiceConfig,
    IconStyle,
    UnknownIconStyle,
    UnsupportedFormat,
    encode_icon,
    generate_icon,
    parse_query,
)
from .shapes import ShapeComposer, rotation_to_offset
from .shields import ShieldComposer, stripe_geometry

__all__ = [
    "ShieldComposer",
    "ShapeComposer",
    "stripe_geometry",
    "rotation_to_offset",
    "IconService",
    "IconServiceConfig",
    "IconStyle",
    "UnknownIconStyle",
    "UnsupportedFormat",
    "generate_icon",
    "encode_icon",
    "parse_query",
]
