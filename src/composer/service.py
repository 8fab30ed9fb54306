"""
Icon Service — style dispatch, JSON encoding and failure reporting

Слой над композерами: выбирает алгоритм по стилю, кодирует дескриптор
в JSON (с опциональной проверкой по JSON Schema) и логирует результат.
Ядро (пул и композеры) не логирует, это делает только этот модуль.

Сервис не хранит изменяемого состояния: каждый запрос создаёт свой
EntropyPool, поэтому generate() можно вызывать из любого числа потоков.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Tuple, Union

from src.composer.shapes import ShapeComposer
from src.composer.shields import ShieldComposer
from src.core.contracts.validators import (
    ContractValidator,
    ShapeIconValidator,
    ShieldIconValidator,
)
from src.core.data.palette import COLORS, EMOJIS
from src.core.domain.color import Color
from src.core.domain.shape import ShapeIconData
from src.core.domain.shield import ShieldIconData
from src.core.entropy.pool import EntropyError, EntropyPool

logger = logging.getLogger(__name__)

IconData = Union[ShieldIconData, ShapeIconData]

FORMAT_SVG: Final[str] = "svg"
FORMAT_JSON: Final[str] = "json"
DEFAULT_FORMAT: Final[str] = FORMAT_SVG
SUPPORTED_FORMATS: Final[Tuple[str, ...]] = (FORMAT_SVG, FORMAT_JSON)


class IconStyle(str, Enum):
    """Стиль иконки"""

    SHIELD = "shield"
    SHAPE = "shape"


class UnknownIconStyle(ValueError):
    """Неизвестный селектор стиля."""


class UnsupportedFormat(ValueError):
    """Формат вывода, который не умеет ни рендерер, ни encoder."""


@dataclass(frozen=True)
class IconServiceConfig:
    """Конфигурация сервиса. Таблицы только читаются."""

    palette: Tuple[Color, ...] = COLORS
    emojis: Tuple[str, ...] = EMOJIS
    validate_contracts: bool = True


def parse_query(query: str) -> Tuple[str, str]:
    """
    Разбор "<seed>.<format>" из URL.

    Seed — всё до первой точки; без точки формат по умолчанию svg.

    Raises:
        UnsupportedFormat: если формат не svg и не json

    Examples:
        >>> parse_query("alice.json")
        ('alice', 'json')
        >>> parse_query("alice")
        ('alice', 'svg')
    """
    if "." not in query:
        return query, DEFAULT_FORMAT

    seed, fmt = query.split(".", 1)
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedFormat(f"Unsupported format \"{fmt}\"")
    return seed, fmt


def resolve_style(style: Union[IconStyle, str]) -> IconStyle:
    """
    IconStyle по enum или строковому селектору ("shield" | "shape").

    Raises:
        UnknownIconStyle: если селектор не соответствует ни одному стилю
    """
    try:
        return IconStyle(style)
    except ValueError:
        raise UnknownIconStyle(
            f"unknown icon style {style!r}, expected one of "
            f"{[s.value for s in IconStyle]}"
        ) from None


class IconService:
    """Генерация и кодирование дескрипторов для обоих стилей."""

    def __init__(self, config: Optional[IconServiceConfig] = None):
        self.config = config or IconServiceConfig()
        self.shield_composer = ShieldComposer(self.config.palette, self.config.emojis)
        self.shape_composer = ShapeComposer(self.config.palette, self.config.emojis)
        self._shield_validator: Optional[ShieldIconValidator] = None
        self._shape_validator: Optional[ShapeIconValidator] = None

    def generate(self, seed: str, style: Union[IconStyle, str]) -> IconData:
        """
        Дескриптор иконки для seed в заданном стиле.

        Raises:
            UnknownIconStyle: если стиль не поддерживается
            EntropyError: композиция прервана (частичный результат не возвращается)
        """
        style = resolve_style(style)
        pool = EntropyPool.from_seed(seed)

        try:
            if style is IconStyle.SHIELD:
                icon = self.shield_composer.compose(pool)
            else:
                icon = self.shape_composer.compose(pool)
        except EntropyError:
            logger.warning(
                "icon composition failed: style=%s draws=%d entropy_bits=%d",
                style.value,
                pool.draw_count,
                pool.entropy_bits,
                exc_info=True,
            )
            raise

        logger.debug(
            "generated %s icon: draws=%d entropy_bits_left=%d",
            style.value,
            pool.draw_count,
            pool.entropy_bits,
        )
        return icon

    def encode(self, icon: IconData) -> str:
        """
        JSON-представление дескриптора (порядок полей = порядок объявления).

        Raises:
            jsonschema.ValidationError: если включена проверка и контракт нарушен
        """
        if self.config.validate_contracts:
            self._validator_for(icon).validate(icon.model_dump(mode="json"))
        return icon.model_dump_json()

    def _validator_for(self, icon: IconData) -> ContractValidator:
        if isinstance(icon, ShieldIconData):
            if self._shield_validator is None:
                self._shield_validator = ShieldIconValidator()
            return self._shield_validator
        if self._shape_validator is None:
            self._shape_validator = ShapeIconValidator()
        return self._shape_validator


_DEFAULT_SERVICE: Optional[IconService] = None


def _default_service() -> IconService:
    global _DEFAULT_SERVICE
    if _DEFAULT_SERVICE is None:
        _DEFAULT_SERVICE = IconService()
    return _DEFAULT_SERVICE


def generate_icon(seed: str, style: Union[IconStyle, str]) -> IconData:
    """generate() на сервисе с конфигурацией по умолчанию."""
    return _default_service().generate(seed, style)


def encode_icon(icon: IconData) -> str:
    """encode() на сервисе с конфигурацией по умолчанию."""
    return _default_service().encode(icon)
