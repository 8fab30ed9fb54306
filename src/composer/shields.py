"""
Shield Composer — shield-style identicon from an entropy pool

Фиксированный порядок draws (каждый draw меняет состояние пула,
поэтому порядок — часть контракта воспроизводимости):

1. field_color   = choose(palette)
2. pattern_color = choose(цвета палитры, контрастирующие с field_color)
3. emoji         = choose(emojis)
4. treatment     = weighted_choose([(SingleColor, 1), (TwoColor, 4), (Stripes, 6)])
5. TwoColor:     angle = choose(ANGLE_CHOICES)
6. Stripes:      count = range(1, 4); padding_tenths = range(1, 4); angle = choose(ANGLE_CHOICES)

Stripes геометрия:
    padding   = padding_tenths / 10
    stride    = (1 - 2*padding) / (2*count + 1)
    stripe_xs = [padding + stride*(2*i + 1) for i in range(count)]
"""

from typing import Final, List, Sequence, Tuple

from src.core.data.palette import COLORS, EMOJIS
from src.core.domain.color import Color, filter_contrasting
from src.core.domain.shield import (
    ANGLE_CHOICES,
    ShieldIconData,
    SingleColor,
    Stripes,
    TwoColor,
)
from src.core.entropy.pool import EntropyPool

TREATMENT_SINGLE_COLOR: Final[str] = "SingleColor"
TREATMENT_TWO_COLOR: Final[str] = "TwoColor"
TREATMENT_STRIPES: Final[str] = "Stripes"

# Веса treatments (сумма 11); порядок определяет владельца интервала весов
TREATMENT_WEIGHTS: Final[Tuple[Tuple[str, int], ...]] = (
    (TREATMENT_SINGLE_COLOR, 1),
    (TREATMENT_TWO_COLOR, 4),
    (TREATMENT_STRIPES, 6),
)

# Количество полос: [1, 4) → 1..3
STRIPE_COUNT_RANGE: Final[Tuple[int, int]] = (1, 4)

# Отступ в десятых: [1, 4) → 0.1..0.3
STRIPE_PADDING_TENTHS_RANGE: Final[Tuple[int, int]] = (1, 4)


def stripe_geometry(count: int, padding: float) -> Tuple[float, List[float]]:
    """
    Шаг и X-координаты центров полос.

    Returns:
        (stride, stripe_xs)

    Examples:
        >>> stride, xs = stripe_geometry(1, 0.1)
        >>> round(stride, 6), [round(x, 6) for x in xs]
        (0.266667, [0.366667])
    """
    stride = (1.0 - 2.0 * padding) / (2.0 * count + 1.0)
    stripe_xs = [padding + stride * (2 * i + 1) for i in range(count)]
    return stride, stripe_xs


class ShieldComposer:
    """
    Композиция ShieldIconData.

    Палитра и emoji передаются один раз при создании и дальше только читаются,
    поэтому один экземпляр можно безопасно использовать из нескольких потоков.
    """

    def __init__(
        self,
        palette: Sequence[Color] = COLORS,
        emojis: Sequence[str] = EMOJIS,
    ):
        self.palette = tuple(palette)
        self.emojis = tuple(emojis)

    def compose(self, pool: EntropyPool) -> ShieldIconData:
        """
        Построение щита из пула.

        Raises:
            EntropyError: любая ошибка пула прерывает композицию целиком
        """
        field_color = pool.choose(self.palette)
        pattern_color = pool.choose(filter_contrasting(field_color, self.palette))
        emoji = pool.choose(self.emojis)

        treatment_kind = pool.weighted_choose(TREATMENT_WEIGHTS)

        if treatment_kind == TREATMENT_TWO_COLOR:
            angle = pool.choose(ANGLE_CHOICES)
            treatment = TwoColor(pattern_color=pattern_color, angle=angle)
        elif treatment_kind == TREATMENT_STRIPES:
            count = pool.range(*STRIPE_COUNT_RANGE)
            padding = pool.range(*STRIPE_PADDING_TENTHS_RANGE) / 10
            stride, stripe_xs = stripe_geometry(count, padding)
            angle = pool.choose(ANGLE_CHOICES)
            treatment = Stripes(
                pattern_color=pattern_color,
                stride=stride,
                stripe_xs=tuple(stripe_xs),
                angle=angle,
            )
        else:
            treatment = SingleColor()

        return ShieldIconData(treatment=treatment, field_color=field_color, emoji=emoji)

    def from_seed(self, seed: str) -> ShieldIconData:
        return self.compose(EntropyPool.from_seed(seed))
