"""
Color — RGB value object and the luminance contrast rule

Immutable Pydantic модель цвета. Контраст двух цветов определяется
разницей яркостей (коэффициенты ITU-R BT.709) с фиксированным порогом.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каналы r, g, b — целые в [0, 255]
2. contrasts_well симметричен: a.contrasts_well(b) == b.contrasts_well(a)
3. Порог и коэффициенты не настраиваются
"""

import re
from typing import Final, Iterable, Tuple

from pydantic import BaseModel, Field

# =============================================================================
# CONTRAST CONSTANTS
# =============================================================================

LUMINANCE_R: Final[float] = 0.2126
LUMINANCE_G: Final[float] = 0.7152
LUMINANCE_B: Final[float] = 0.0722

# Минимальная разница яркостей, при которой два цвета различимы
CONTRAST_THRESHOLD: Final[float] = 75.0

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


# =============================================================================
# COLOR MODEL
# =============================================================================


class Color(BaseModel):
    """RGB цвет."""

    r: int = Field(..., ge=0, le=255, description="Red component")
    g: int = Field(..., ge=0, le=255, description="Green component")
    b: int = Field(..., ge=0, le=255, description="Blue component")

    model_config = {"frozen": True}

    @classmethod
    def black(cls) -> "Color":
        return cls(r=0, g=0, b=0)

    @classmethod
    def white(cls) -> "Color":
        return cls(r=255, g=255, b=255)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """
        Разбор "#rrggbb" (решётка необязательна).

        Raises:
            ValueError: если строка не в формате rrggbb
        """
        match = _HEX_COLOR_RE.match(value)
        if match is None:
            raise ValueError(f"invalid hex color: {value!r}")
        r, g, b = (int(part, 16) for part in match.groups())
        return cls(r=r, g=g, b=b)

    def luminance(self) -> float:
        """Относительная яркость: 0.2126*r + 0.7152*g + 0.0722*b."""
        return LUMINANCE_R * self.r + LUMINANCE_G * self.g + LUMINANCE_B * self.b

    def contrasts_well(self, other: "Color") -> bool:
        """|luminance(self) - luminance(other)| > CONTRAST_THRESHOLD."""
        return abs(self.luminance() - other.luminance()) > CONTRAST_THRESHOLD

    def css_color(self) -> str:
        """
        Цвет в формате CSS.

        Examples:
            >>> Color(r=12, g=34, b=56).css_color()
            'rgb(12,34,56)'
        """
        return f"rgb({self.r},{self.g},{self.b})"

    def hex_color(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


def filter_contrasting(reference: Color, palette: Iterable[Color]) -> Tuple[Color, ...]:
    """
    Цвета палитры, хорошо контрастирующие с reference (порядок палитры сохраняется).

    Чистый фильтр, энтропию не потребляет.
    """
    return tuple(color for color in palette if reference.contrasts_well(color))
