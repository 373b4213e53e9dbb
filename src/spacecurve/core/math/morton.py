"""
Morton — чередование битов координат (Z-order)

Модуль кодирует D координат в один индекс чередованием битов от младших к
старшим и выполняет обратное преобразование.

Быстрые пути:
- D = 2, до 16 битов на ось: part1by1 / compact1by1
- D = 3, до 10 битов на ось: part1by2 / compact1by2
Остальные размерности обрабатываются побитовым циклом.

ВАЖНО: Morton-код не сохраняет непрерывность — соседние индексы могут
соответствовать удалённым точкам решётки.
"""

from typing import Sequence

from spacecurve.core.math.bit_ops import bitmask

# =============================================================================
# MAGIC-CONSTANT BIT SPREADING
# =============================================================================


def part1by1(n: int) -> int:
    """Разнесение битов 16-битного числа с одним нулём между битами (1011 → 1000101)."""
    n &= 0x0000FFFF
    n = (n ^ (n << 8)) & 0x00FF00FF
    n = (n ^ (n << 4)) & 0x0F0F0F0F
    n = (n ^ (n << 2)) & 0x33333333
    n = (n ^ (n << 1)) & 0x55555555
    return n


def compact1by1(n: int) -> int:
    """Сжатие каждого второго бита, обратное к part1by1."""
    n &= 0x55555555
    n = (n ^ (n >> 1)) & 0x33333333
    n = (n ^ (n >> 2)) & 0x0F0F0F0F
    n = (n ^ (n >> 4)) & 0x00FF00FF
    n = (n ^ (n >> 8)) & 0x0000FFFF
    return n


def part1by2(n: int) -> int:
    """Разнесение битов 10-битного числа с двумя нулями между битами (1011 → 1001001)."""
    n &= 0x000003FF
    n = (n ^ (n << 16)) & 0xFF0000FF
    n = (n ^ (n << 8)) & 0x0300F00F
    n = (n ^ (n << 4)) & 0x030C30C3
    n = (n ^ (n << 2)) & 0x09249249
    return n


def compact1by2(n: int) -> int:
    """Сжатие каждого третьего бита, обратное к part1by2."""
    n &= 0x09249249
    n = (n ^ (n >> 2)) & 0x030C30C3
    n = (n ^ (n >> 4)) & 0x0300F00F
    n = (n ^ (n >> 8)) & 0xFF0000FF
    n = (n ^ (n >> 16)) & 0x000003FF
    return n


# =============================================================================
# INTERLEAVE / DEINTERLEAVE
# =============================================================================


def interleave_lsb(coords: Sequence[int], bits_per_axis: int) -> int:
    """
    Чередование младших битов координат в одно значение.

    Бит `bit` координаты `dim` попадает в позицию `bit * D + dim`.

    Args:
        coords: Координаты (D значений)
        bits_per_axis: Сколько младших битов читать из каждой координаты

    Returns:
        Morton-код

    Examples:
        >>> interleave_lsb([1, 0], 1)
        1
        >>> interleave_lsb([0, 1], 1)
        2
    """
    dimension = len(coords)
    if dimension == 0 or bits_per_axis == 0:
        return 0

    if dimension == 2 and bits_per_axis <= 16:
        mask = bitmask(bits_per_axis)
        return part1by1(coords[0] & mask) | (part1by1(coords[1] & mask) << 1)

    if dimension == 3 and bits_per_axis <= 10:
        mask = bitmask(bits_per_axis)
        return (
            part1by2(coords[0] & mask)
            | (part1by2(coords[1] & mask) << 1)
            | (part1by2(coords[2] & mask) << 2)
        )

    return _interleave_generic(coords, bits_per_axis)


def deinterleave_lsb(dimension: int, bits_per_axis: int, value: int) -> list[int]:
    """
    Разбор Morton-кода на координаты.

    Args:
        dimension: Количество координат
        bits_per_axis: Битов на координату
        value: Morton-код

    Returns:
        Список из `dimension` координат
    """
    if dimension == 0:
        return []
    if bits_per_axis == 0:
        return [0] * dimension

    if dimension == 2 and bits_per_axis <= 16:
        mask = bitmask(bits_per_axis)
        return [compact1by1(value) & mask, compact1by1(value >> 1) & mask]

    if dimension == 3 and bits_per_axis <= 10:
        mask = bitmask(bits_per_axis)
        return [
            compact1by2(value) & mask,
            compact1by2(value >> 1) & mask,
            compact1by2(value >> 2) & mask,
        ]

    return _deinterleave_generic(dimension, bits_per_axis, value)


def _interleave_generic(coords: Sequence[int], bits_per_axis: int) -> int:
    dimension = len(coords)
    value = 0
    for bit in range(bits_per_axis):
        for dim, coord in enumerate(coords):
            value |= ((coord >> bit) & 1) << (bit * dimension + dim)
    return value


def _deinterleave_generic(dimension: int, bits_per_axis: int, value: int) -> list[int]:
    coords = [0] * dimension
    for bit in range(bits_per_axis):
        for dim in range(dimension):
            coords[dim] |= ((value >> (bit * dimension + dim)) & 1) << bit
    return coords
