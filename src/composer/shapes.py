"""
Shape Composer — shape-style identicon from an entropy pool

Фиксированный порядок draws:

1. emoji        = choose(emojis)
2. border_color = choose(цвета, контрастирующие с белым)
3. fill_color   = choose(цвета, контрастирующие с border_color)
4. sides        = range(1, 10); sides <= 2 → Circle, иначе Polygon(sides)
5. rotation     = range(0, 100) → offset

Смещение (offset) смещено в сторону выровненных ориентаций:
    rotation >= 75 → 0.5   (1/4 исходов)
    rotation >= 50 → 0.0   (1/4 исходов)
    иначе          → rotation / 50.0  ([0, 1.0) для оставшейся половины)
"""

from typing import Final, Sequence, Tuple

from src.core.data.palette import COLORS, EMOJIS
from src.core.domain.color import Color, filter_contrasting
from src.core.domain.shape import Circle, Polygon, ShapeIconData
from src.core.entropy.pool import EntropyPool

# Количество сторон: [1, 10) → 1..9
SIDES_RANGE: Final[Tuple[int, int]] = (1, 10)

# Всё, что <= MAX_CIRCLE_SIDES, рисуется кругом
MAX_CIRCLE_SIDES: Final[int] = 2

ROTATION_RANGE: Final[Tuple[int, int]] = (0, 100)
ROTATION_HALF_ALIGNED_FROM: Final[int] = 75
ROTATION_ALIGNED_FROM: Final[int] = 50
ROTATION_SCALE: Final[float] = 50.0


def rotation_to_offset(rotation: int) -> float:
    """
    Examples:
        >>> rotation_to_offset(80), rotation_to_offset(60), rotation_to_offset(25)
        (0.5, 0.0, 0.5)
    """
    if rotation >= ROTATION_HALF_ALIGNED_FROM:
        return 0.5
    if rotation >= ROTATION_ALIGNED_FROM:
        return 0.0
    return rotation / ROTATION_SCALE


class ShapeComposer:
    """Композиция ShapeIconData."""

    def __init__(
        self,
        palette: Sequence[Color] = COLORS,
        emojis: Sequence[str] = EMOJIS,
    ):
        self.palette = tuple(palette)
        self.emojis = tuple(emojis)
        # Не зависит от пула, считается один раз
        self.border_candidates = filter_contrasting(Color.white(), self.palette)

    def compose(self, pool: EntropyPool) -> ShapeIconData:
        emoji = pool.choose(self.emojis)

        border_color = pool.choose(self.border_candidates)
        fill_color = pool.choose(filter_contrasting(border_color, self.palette))

        sides = pool.range(*SIDES_RANGE)
        if sides <= MAX_CIRCLE_SIDES:
            shape = Circle()
        else:
            shape = Polygon(sides=sides)

        offset = rotation_to_offset(pool.range(*ROTATION_RANGE))

        return ShapeIconData(
            emoji=emoji,
            shape=shape,
            fill_color=fill_color,
            border_color=border_color,
            offset=offset,
        )

    def from_seed(self, seed: str) -> ShapeIconData:
        return self.compose(EntropyPool.from_seed(seed))
