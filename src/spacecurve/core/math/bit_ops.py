"""
Bit Operations — битовые примитивы для space-filling curves

Модуль содержит stateless-операции, которые используют все семейства кривых:
- Binary Reflected Gray Code (прямой и обратный)
- Маски, циклические сдвиги и извлечение диапазонов битов
- Транспонирование битов (coordinate-major ↔ depth-major)

Все значения трактуются как беззнаковые 32-битные слова. Python int не
переполняется, поэтому ширина ограничивается явными масками.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. graycode(i) и graycode(i + 1) отличаются ровно одним битом
2. igraycode(graycode(x)) == x для любого x >= 0
3. Функции тотальны: некорректная ширина маскируется, а не бросает исключение
"""

from typing import Final, Sequence

# =============================================================================
# CONSTANTS
# =============================================================================

# Ширина машинного слова для индексов и координат
WORD_BITS: Final[int] = 32


# =============================================================================
# GRAY CODE
# =============================================================================


def graycode(x: int) -> int:
    """
    Binary Reflected Gray Code (BRGC) для x.

    Examples:
        >>> graycode(3)
        2
        >>> graycode(4)
        6
    """
    return x ^ (x >> 1)


def igraycode(x: int) -> int:
    """
    Обратный Gray code: восстановление бинарного значения из BRGC.

    XOR-аккумуляция всех правых сдвигов, начиная со старшего бита.

    Examples:
        >>> igraycode(2)
        3
        >>> igraycode(graycode(10))
        10
    """
    g = x
    b = x
    while g:
        g >>= 1
        b ^= g
    return b


def parity(x: int) -> int:
    """Чётность числа установленных битов (0 или 1)."""
    return x.bit_count() % 2


# =============================================================================
# МАСКИ И СДВИГИ
# =============================================================================


def bitmask(width: int) -> int:
    """
    Маска из `width` младших единичных битов.

    Args:
        width: Количество битов (0 → 0, >= WORD_BITS → все 32 бита)

    Returns:
        Маска 2^width - 1, ограниченная шириной слова
    """
    if width <= 0:
        return 0
    if width >= WORD_BITS:
        return (1 << WORD_BITS) - 1
    return (1 << width) - 1


def lrot(word: int, shift: int, width: int) -> int:
    """
    Циклический сдвиг влево в пределах `width` битов.

    Args:
        word: Исходное слово (лишние биты отбрасываются маской)
        shift: Величина сдвига (берётся по модулю width)
        width: Ширина слова

    Returns:
        Повёрнутое слово; 0 при нулевой ширине
    """
    width %= WORD_BITS
    if width == 0:
        return 0
    mask = bitmask(width)
    shift %= width
    w = word & mask
    return ((w << shift) | (w >> (width - shift))) & mask


def rrot(word: int, shift: int, width: int) -> int:
    """
    Циклический сдвиг вправо в пределах `width` битов.

    Обратная операция к lrot с той же шириной и сдвигом.
    """
    width %= WORD_BITS
    if width == 0:
        return 0
    mask = bitmask(width)
    shift %= width
    w = word & mask
    return ((w >> shift) | (w << (width - shift))) & mask


def bitrange(word: int, width: int, start: int, end: int) -> int:
    """
    Извлечение диапазона битов [start, end) слова шириной `width`.

    Позиции отсчитываются от старшего бита (0 — самый старший бит слова).
    Выход за пределы ширины обрезается.

    Examples:
        >>> bitrange(2, 5, 3, 5)
        2
        >>> bitrange(4, 5, 2, 3)
        1
    """
    if start >= end or width == 0:
        return 0
    clamped_end = min(end, width)
    clamped_start = min(start, clamped_end)
    length = clamped_end - clamped_start
    if length == 0:
        return 0
    shift = max(width - clamped_end, 0)
    return (word >> shift) & bitmask(length)


def setbit(word: int, width: int, pos: int, bit: int) -> int:
    """
    Установка бита `pos` (отсчёт от старшего бита) в значение `bit`.

    Args:
        word: Исходное слово
        width: Ширина слова
        pos: Позиция в [0, width)
        bit: 0 или 1 (учитывается только младший бит)

    Returns:
        Новое слово; при pos вне ширины возвращается исходное слово
    """
    if width == 0 or pos >= width:
        return word
    offset = width - pos - 1
    mask = 1 << offset if offset < WORD_BITS else 0
    if bit & 1:
        return word | mask
    return word & ~mask


def tsb(word: int, width: int) -> int:
    """
    Количество младших подряд идущих единичных битов (trailing set bits).

    Examples:
        >>> tsb(3, 5)
        2
        >>> tsb(2, 5)
        0
    """
    x = word & bitmask(width)
    # x ^ (x + 1): единицы ровно в хвосте x плюс один бит переноса
    return (x ^ (x + 1)).bit_length() - 1


# =============================================================================
# ТРАНСПОНИРОВАНИЕ
# =============================================================================


def bit_transpose(d: int, values: Sequence[int]) -> list[int]:
    """
    Транспонирование n чисел по d битов в d чисел по n битов.

    Бит `bit` элемента `off` переходит в элемент `d - bit - 1` на позицию
    `n - off - 1`. Используется H-curve для перехода между координатами и
    alpha-цифрами уровней рекурсии.

    Args:
        d: Ширина исходных чисел в битах (= длина результата)
        values: Исходные n чисел

    Returns:
        Список из d чисел шириной n битов

    Examples:
        >>> bit_transpose(2, [0b00, 0b01, 0b10, 0b11])
        [3, 5]
    """
    n = len(values)
    result = [0] * d
    for off, x in enumerate(values):
        for bit in range(d):
            if x & (1 << bit):
                result[d - bit - 1] |= 1 << (n - off - 1)
    return result
