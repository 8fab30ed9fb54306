"""
Digest Source — SHA-512 seed → 512-bit unsigned integer

Превращает произвольную UTF-8 строку в фиксированное 512-битное
беззнаковое целое (big-endian). Это единственный источник энтропии
для EntropyPool.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Чистая функция: одинаковый seed → одинаковое число
2. Результат всегда в [0, 2^512)
3. Пустая строка — валидный seed
"""

import hashlib
from typing import Final

# Ширина дайджеста в битах (SHA-512)
DIGEST_BITS: Final[int] = 512

# Верхняя граница (исключительная) для значения дайджеста
DIGEST_BOUND: Final[int] = 1 << DIGEST_BITS


def sha512_digest(seed: str) -> bytes:
    """
    Сырой SHA-512 дайджест UTF-8 представления seed.

    Raises:
        TypeError: если seed не str
    """
    if not isinstance(seed, str):
        raise TypeError(f"seed must be str, got {type(seed).__name__}")
    return hashlib.sha512(seed.encode("utf-8")).digest()


def sha512_int(seed: str) -> int:
    """
    Дайджест seed как 512-битное беззнаковое целое (big-endian).

    Examples:
        >>> sha512_int("") < DIGEST_BOUND
        True
    """
    return int.from_bytes(sha512_digest(seed), byteorder="big", signed=False)
