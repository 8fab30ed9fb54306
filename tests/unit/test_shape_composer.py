"""
Тесты для ShapeComposer

Проверяемые инварианты:
1. Golden vectors — фиксируют порядок draws и арифметику
2. border_color контрастирует с белым, fill_color — с border_color
3. sides 1..2 → Circle, никогда Polygon(1) / Polygon(2)
4. offset: rotation >= 75 → 0.5, rotation >= 50 → 0.0, иначе rotation / 50
"""

import pytest

from src.composer.shapes import ShapeComposer, rotation_to_offset
from src.core.data import COLORS, EMOJIS
from src.core.domain import Circle, Color, Polygon, ShapeIconData, filter_contrasting
from src.core.entropy import EntropyExhausted, EntropyPool, InvalidRange


def pool_from_digits(digits):
    """Пул, чьи последовательные take() вернут заданные (digit, size)."""
    value = 0
    for digit, size in reversed(digits):
        value = value * size + digit
    return EntropyPool(value)


@pytest.fixture
def composer():
    return ShapeComposer()


@pytest.fixture
def mono_composer():
    """Палитра (black, white): border всегда black, fill всегда white."""
    return ShapeComposer(palette=(Color.black(), Color.white()), emojis=("A", "B"))


def mono_pool(sides_draw: int, rotation: int) -> EntropyPool:
    return pool_from_digits([(1, 2), (0, 1), (0, 1), (sides_draw, 9), (rotation, 100)])


# =============================================================================
# ТЕСТЫ: Golden vectors
# =============================================================================


class TestShapeGoldenVectors:
    """Фиксированные seeds → фиксированные иконки (при неизменной палитре)."""

    def test_seed_one(self, composer):
        assert composer.from_seed("one") == ShapeIconData(
            emoji="🎺",
            shape=Polygon(sides=4),
            fill_color=Color(r=18, g=188, b=0),
            border_color=Color(r=128, g=0, b=215),
            offset=0.0,
        )

    def test_seed_one_emoji_index(self, composer):
        assert composer.from_seed("one").emoji == EMOJIS[302]

    def test_seed_two(self, composer):
        icon = composer.from_seed("two")
        assert icon.emoji == "🚛"
        assert icon.shape == Polygon(sides=6)
        assert icon.border_color == Color(r=48, g=230, b=11)
        assert icon.fill_color == Color(r=90, g=0, b=2)
        assert icon.offset == pytest.approx(0.04)

    def test_seed_three(self, composer):
        icon = composer.from_seed("three")
        assert icon.emoji == "👠"
        assert icon.shape == Polygon(sides=3)
        assert icon.border_color == Color(r=177, g=177, b=179)
        assert icon.fill_color == Color(r=32, g=35, b=64)
        assert icon.offset == pytest.approx(0.88)

    def test_seed_e_circle(self, composer):
        """sides = 1 → Circle."""
        assert composer.from_seed("e") == ShapeIconData(
            emoji="🐉",
            shape=Circle(),
            fill_color=Color(r=0, g=96, b=223),
            border_color=Color(r=215, g=182, b=0),
            offset=0.5,
        )

    def test_seed_a_circle(self, composer):
        """sides = 2 → Circle."""
        icon = composer.from_seed("a")
        assert icon.shape == Circle()
        assert icon.emoji == "🌵"
        assert icon.border_color == Color(r=177, g=177, b=179)
        assert icon.fill_color == Color(r=113, g=43, b=0)
        assert icon.offset == 0.5


# =============================================================================
# ТЕСТЫ: Invariants
# =============================================================================


class TestShapeInvariants:
    """Свойства, выполняющиеся для любого seed."""

    def test_contrast(self, composer):
        white = Color.white()
        for i in range(300):
            icon = composer.from_seed(f"shape-{i}")
            assert white.contrasts_well(icon.border_color)
            assert icon.border_color.contrasts_well(icon.fill_color)

    def test_shape_and_offset_ranges(self, composer):
        for i in range(300):
            icon = composer.from_seed(f"range-{i}")
            if isinstance(icon.shape, Polygon):
                assert 3 <= icon.shape.sides <= 9
            assert 0.0 <= icon.offset < 1.0
            assert icon.emoji in EMOJIS
            assert icon.fill_color in COLORS

    def test_border_candidates(self, composer):
        assert composer.border_candidates == filter_contrasting(Color.white(), COLORS)
        assert len(composer.border_candidates) == 48

    def test_deterministic(self, composer):
        assert composer.from_seed("repeat") == composer.from_seed("repeat")


# =============================================================================
# ТЕСТЫ: Draw order & boundaries
# =============================================================================


class TestShapeDrawOrder:
    """Порядок draws на пуле с заданными цифрами."""

    @pytest.mark.parametrize("sides_draw", [0, 1])
    def test_low_sides_are_circle(self, mono_composer, sides_draw):
        icon = mono_composer.compose(mono_pool(sides_draw, 0))
        assert icon.shape == Circle()

    @pytest.mark.parametrize("sides_draw", range(2, 9))
    def test_polygon_sides(self, mono_composer, sides_draw):
        icon = mono_composer.compose(mono_pool(sides_draw, 0))
        assert icon.shape == Polygon(sides=sides_draw + 1)

    def test_full_draw_sequence(self, mono_composer):
        pool = mono_pool(5, 20)
        icon = mono_composer.compose(pool)
        assert icon == ShapeIconData(
            emoji="B",
            shape=Polygon(sides=6),
            fill_color=Color.white(),
            border_color=Color.black(),
            offset=0.4,
        )
        assert pool.draw_count == 5

    def test_default_palette_draw_sequence(self, composer):
        """Цифры (emoji, border, fill, sides, rotation) на реальной палитре."""
        border = composer.border_candidates[7]
        fills = filter_contrasting(border, COLORS)
        pool = pool_from_digits(
            [(10, len(EMOJIS)), (7, 48), (len(fills) - 1, len(fills)), (8, 9), (99, 100)]
        )
        icon = composer.compose(pool)
        assert icon.emoji == EMOJIS[10]
        assert icon.border_color == border
        assert icon.fill_color == fills[-1]
        assert icon.shape == Polygon(sides=9)
        assert icon.offset == 0.5


class TestRotationToOffset:
    """Смещение ориентации в сторону выровненных значений."""

    @pytest.mark.parametrize("rotation", [75, 80, 99])
    def test_half_aligned(self, rotation):
        assert rotation_to_offset(rotation) == 0.5

    @pytest.mark.parametrize("rotation", [50, 60, 74])
    def test_aligned(self, rotation):
        assert rotation_to_offset(rotation) == 0.0

    @pytest.mark.parametrize("rotation", [0, 1, 25, 49])
    def test_continuous(self, rotation):
        assert rotation_to_offset(rotation) == rotation / 50.0

    def test_lower_branch_reachable(self):
        """Ветка rotation / 50 достижима и покрывает [0, 1)."""
        offsets = {rotation_to_offset(r) for r in range(100)}
        assert 0.0 in offsets
        assert 0.5 in offsets
        assert 0.98 in offsets
        assert max(offsets) < 1.0
        # 50 уникальных значений из нижней половины (0.0 и 0.5 уже среди них)
        assert len(offsets) == 50

    def test_quarters(self):
        outcomes = [rotation_to_offset(r) for r in range(100)]
        assert sum(1 for r in range(100) if r >= 75) == 25
        assert outcomes.count(0.5) == 25 + 1  # rotation 25 → 0.5
        assert outcomes.count(0.0) == 25 + 1  # rotation 0 → 0.0


# =============================================================================
# ТЕСТЫ: Failures
# =============================================================================


class TestShapeFailures:
    """Ошибки пула прерывают композицию."""

    def test_no_border_candidates(self):
        composer = ShapeComposer(palette=(Color.white(), Color(r=240, g=240, b=240)))
        with pytest.raises(InvalidRange):
            composer.from_seed("one")

    def test_exhausted_pool(self, composer):
        with pytest.raises(EntropyExhausted):
            composer.compose(EntropyPool(3, current_max=100))
