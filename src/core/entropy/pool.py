"""
Entropy Pool — Mixed-Radix Extraction from a 512-bit Digest

Пул хранит остаток дайджеста (remaining) и наименьшую известную верхнюю
границу для него (current_max). Каждый draw снимает одну "цифру"
смешанной системы счисления: remaining mod size, после чего remaining и
current_max делятся нацело на size.

Пока size <= current_max, каждая цифра равномерна на [0, size) и
независима от предыдущих. Запрос, который граница не может покрыть,
отклоняется, а не урезается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 <= remaining < current_max в любой момент
2. current_max не возрастает
3. Результат take(size) всегда в [0, size)
4. Нет clamp / retry: либо валидное значение, либо EntropyError
5. Порядок элементов в weighted_choose определяет владельца интервала весов
"""

from typing import Final, Sequence, Tuple, TypeVar

from src.core.entropy.digest import DIGEST_BOUND, sha512_int

T = TypeVar("T")

# Начальная граница пула: 2^512
INITIAL_MAX: Final[int] = DIGEST_BOUND


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EntropyError(Exception):
    """Базовая ошибка пула. Композиция, получившая её, прерывается целиком."""


class EntropyExhausted(EntropyError):
    """Запрошенный диапазон больше, чем оставшаяся граница current_max."""


class InvalidRange(EntropyError):
    """Некорректные аргументы low/high (high <= low) или отрицательный вес."""


class WeightSumZero(EntropyError):
    """Сумма весов в weighted_choose равна нулю."""


def _require_int(name: str, value: object) -> int:
    # bool является подклассом int, но как размер диапазона не имеет смысла
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


# =============================================================================
# WEIGHTED SELECTION
# =============================================================================


def select_weighted(choices: Sequence[Tuple[T, int]], draw: int) -> T:
    """
    Выбор элемента, которому принадлежит точка draw.

    Элемент i владеет полуинтервалом [cumulative_before, cumulative_before + weight_i).
    draw должен быть равномерным на [0, total_weight); его предоставляет вызывающий.

    Args:
        choices: последовательность (item, weight), порядок значим
        draw: точка в [0, total_weight)

    Returns:
        Первый item, чей накопленный вес превышает draw

    Raises:
        InvalidRange: если draw вне [0, total_weight)

    Examples:
        >>> select_weighted([("a", 1), ("b", 4)], 0)
        'a'
        >>> select_weighted([("a", 1), ("b", 4)], 1)
        'b'
    """
    if draw < 0:
        raise InvalidRange(f"draw must be non-negative, got {draw}")

    cumulative = 0
    for item, weight in choices:
        cumulative += weight
        if draw < cumulative:
            return item

    raise InvalidRange(f"draw {draw} outside total weight {cumulative}")


# =============================================================================
# ENTROPY POOL
# =============================================================================


class EntropyPool:
    """
    Детерминированный источник равномерных draws из одного большого целого.

    Создаётся на один запрос генерации, потребляется одной композицией,
    после ошибки не переиспользуется.
    """

    __slots__ = ("_remaining", "_current_max", "_draw_count")

    def __init__(self, remaining: int, current_max: int = INITIAL_MAX):
        remaining = _require_int("remaining", remaining)
        current_max = _require_int("current_max", current_max)
        if current_max < 1:
            raise ValueError(f"current_max must be positive, got {current_max}")
        if not 0 <= remaining < current_max:
            raise ValueError(
                f"remaining must be in [0, current_max), got remaining={remaining} "
                f"current_max={current_max}"
            )

        self._remaining = remaining
        self._current_max = current_max
        self._draw_count = 0

    @classmethod
    def from_seed(cls, seed: str) -> "EntropyPool":
        """Пул, заполненный SHA-512 дайджестом seed."""
        return cls(sha512_int(seed), INITIAL_MAX)

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def current_max(self) -> int:
        return self._current_max

    @property
    def draw_count(self) -> int:
        """Количество успешных take() за время жизни пула."""
        return self._draw_count

    @property
    def entropy_bits(self) -> int:
        """Число целых бит, которые пул ещё гарантированно может выдать."""
        return self._current_max.bit_length() - 1

    def __repr__(self) -> str:
        return (
            f"EntropyPool(entropy_bits={self.entropy_bits}, "
            f"draw_count={self._draw_count})"
        )

    # -------------------------------------------------------------------------
    # Primitive draw
    # -------------------------------------------------------------------------

    def take(self, size: int) -> int:
        """
        Снять одну цифру в основании size.

        result = remaining mod size
        remaining = remaining div size
        current_max = current_max div size

        Args:
            size: основание, 1 <= size <= current_max

        Returns:
            Целое в [0, size)

        Raises:
            EntropyExhausted: если size < 1 или size > current_max
        """
        size = _require_int("size", size)
        if size < 1 or size > self._current_max:
            raise EntropyExhausted(
                f"cannot take size={size}: current_max={self._current_max} "
                f"after {self._draw_count} draws"
            )

        result, self._remaining = self._remaining % size, self._remaining // size
        self._current_max //= size
        self._draw_count += 1
        return result

    # -------------------------------------------------------------------------
    # Derived draws
    # -------------------------------------------------------------------------

    def range(self, low: int, high: int) -> int:
        """
        Равномерное целое в [low, high).

        Raises:
            InvalidRange: если high <= low
        """
        low = _require_int("low", low)
        high = _require_int("high", high)
        if high <= low:
            raise InvalidRange(f"high must be greater than low, got low={low} high={high}")
        return low + self.take(high - low)

    def choose(self, sequence: Sequence[T]) -> T:
        """
        Равномерный выбор элемента последовательности.

        Raises:
            InvalidRange: если последовательность пуста
        """
        return sequence[self.range(0, len(sequence))]

    def weighted_choose(self, choices: Sequence[Tuple[T, int]]) -> T:
        """
        Выбор элемента пропорционально весу.

        Делает ровно один draw: r = range(0, total_weight), затем
        select_weighted(choices, r).

        Raises:
            InvalidRange: если какой-либо вес отрицателен
            WeightSumZero: если сумма весов равна нулю
        """
        total = 0
        for item, weight in choices:
            weight = _require_int("weight", weight)
            if weight < 0:
                raise InvalidRange(f"weight for {item!r} must be non-negative, got {weight}")
            total += weight

        if total == 0:
            raise WeightSumZero(f"total weight of {len(choices)} choices is zero")

        return select_weighted(choices, self.range(0, total))
