"""
Shape Icon — descriptor of a shape-style identicon

Фигура (правильный многоугольник или круг) с рамкой, заливкой и emoji.
Координаты вершин вычисляются из (sides, offset) и в дескрипторе не хранятся.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Polygon.sides >= 3 (1 и 2 стороны представлены как Circle)
2. border_color контрастирует с белым, fill_color — с border_color
3. offset в [0, 1]
"""

import math
from typing import Annotated, Final, List, Literal, Tuple, Union

from pydantic import BaseModel, Field, model_validator

from src.core.domain.color import Color
from src.core.domain.shield import Emoji

# Радиус и центр вершин в нормализованных координатах [0, 1]
VERTEX_RADIUS: Final[float] = 0.45
VERTEX_CENTER: Final[float] = 0.5


# =============================================================================
# SHAPE KINDS
# =============================================================================


class Polygon(BaseModel):
    """Правильный многоугольник."""

    type: Literal["Polygon"] = "Polygon"
    sides: int = Field(..., ge=3, description="Количество сторон")

    model_config = {"frozen": True}


class Circle(BaseModel):
    """Круг."""

    type: Literal["Circle"] = "Circle"

    model_config = {"frozen": True}


ShapeKind = Annotated[Union[Polygon, Circle], Field(discriminator="type")]


def polygon_vertices(sides: int, offset: float) -> List[Tuple[float, float]]:
    """
    Вершины правильного многоугольника, вписанного в единичный квадрат.

    angle_step = 2π / sides
    vertex_i = (cos(angle_step*i + offset*angle_step) * 0.45 + 0.5,
                sin(angle_step*i + offset*angle_step) * 0.45 + 0.5)

    offset задаёт поворот в долях angle_step.
    """
    if sides < 3:
        raise ValueError(f"polygon needs at least 3 sides, got {sides}")

    angle_step = 2.0 * math.pi / sides
    vertices = []
    for i in range(sides):
        angle = angle_step * i + offset * angle_step
        vertices.append(
            (
                math.cos(angle) * VERTEX_RADIUS + VERTEX_CENTER,
                math.sin(angle) * VERTEX_RADIUS + VERTEX_CENTER,
            )
        )
    return vertices


# =============================================================================
# SHAPE ICON
# =============================================================================


class ShapeIconData(BaseModel):
    """Описание иконки-фигуры. Порядок полей = порядок полей в JSON."""

    emoji: Emoji
    shape: ShapeKind
    fill_color: Color
    border_color: Color
    offset: float = Field(..., ge=0.0, le=1.0, description="Поворот в долях шага угла")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_contrast(self) -> "ShapeIconData":
        if not Color.white().contrasts_well(self.border_color):
            raise ValueError(
                f"border_color {self.border_color.css_color()} does not contrast with white"
            )
        if not self.border_color.contrasts_well(self.fill_color):
            raise ValueError(
                f"fill_color {self.fill_color.css_color()} does not contrast with "
                f"border_color {self.border_color.css_color()}"
            )
        return self

    def vertices(self) -> List[Tuple[float, float]]:
        """Вершины для рендера; пустой список для Circle."""
        if isinstance(self.shape, Polygon):
            return polygon_vertices(self.shape.sides, self.offset)
        return []
