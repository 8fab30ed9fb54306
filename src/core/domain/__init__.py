"""
Domain models and value objects.

Contains the icon descriptors (ShieldIconData, ShapeIconData) and the Color value object.
"""

from src.core.domain.color import (
    CONTRAST_THRESHOLD,
    LUMINANCE_B,
    LUMINANCE_G,
    LUMINANCE_R,
    Color,
    filter_contrasting,
)
from src.core.domain.shape import (
    Circle,
    Polygon,
    ShapeIconData,
    ShapeKind,
    polygon_vertices,
)
from src.core.domain.shield import (
    ANGLE_CHOICES,
    Emoji,
    ShieldIconData,
    ShieldTreatment,
    SingleColor,
    Stripes,
    TwoColor,
)

__all__ = [
    # Color
    "CONTRAST_THRESHOLD",
    "LUMINANCE_R",
    "LUMINANCE_G",
    "LUMINANCE_B",
    "Color",
    "filter_contrasting",
    # Shield
    "ANGLE_CHOICES",
    "Emoji",
    "ShieldIconData",
    "ShieldTreatment",
    "SingleColor",
    "TwoColor",
    "Stripes",
    # Shape
    "ShapeIconData",
    "ShapeKind",
    "Polygon",
    "Circle",
    "polygon_vertices",
]
