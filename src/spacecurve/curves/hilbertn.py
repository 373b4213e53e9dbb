"""
N-D Hilbert — обобщённое отображение по Hamilton (Compact Hilbert Indices)

Состояние уровня: entry (угол входа в подкуб) и direction (ось выхода).
Каждый уровень кодирует `dimension` битов индекса: метка ячейки переводится
в локальную систему координат (transform), затем в слово через обратный Gray
code. Заметно медленнее 2D автомата, поэтому используется только для D != 2.
"""

from spacecurve.core.math.bit_ops import (
    bitmask,
    bitrange,
    graycode,
    igraycode,
    lrot,
    rrot,
    setbit,
    tsb,
)


def transform(entry: int, direction: int, width: int, x: int) -> int:
    """Перевод метки в локальную систему координат подкуба."""
    mask = bitmask(width)
    return rrot((x ^ entry) & mask, direction + 1, width)


def itransform(entry: int, direction: int, width: int, x: int) -> int:
    """Обратное к transform()."""
    mask = bitmask(width)
    return lrot(x & mask, direction + 1, width) ^ entry


def direction(x: int, n: int) -> int:
    """Ось, вдоль которой кривая покидает подкуб с номером `x`."""
    masked = x & bitmask(n)
    if masked == 0:
        return 0
    if masked % 2 == 0:
        return tsb(masked - 1, n) % n
    return tsb(masked, n) % n


def entry(x: int) -> int:
    """Угол входа в подкуб с номером `x`."""
    if x == 0:
        return 0
    return graycode(2 * ((x - 1) // 2))


def hilbert_point(dimension: int, order: int, index: int) -> list[int]:
    """
    N-D точка кривой Hilbert для индекса `index`.

    Args:
        dimension: Размерность
        order: Порядок (сторона 2^order)
        index: Индекс в [0, 2^(order * dimension))

    Returns:
        Список из `dimension` координат
    """
    hwidth = order * dimension
    entry_state = 0
    direction_state = 0
    point = [0] * dimension
    for order_idx in range(order):
        word = bitrange(
            index,
            hwidth,
            order_idx * dimension,
            order_idx * dimension + dimension,
        )
        label = itransform(entry_state, direction_state, dimension, graycode(word))
        for coord in range(dimension):
            bit_val = bitrange(label, dimension, coord, coord + 1)
            point[coord] = setbit(point[coord], order, order_idx, bit_val)
        entry_state ^= lrot(entry(word), direction_state + 1, dimension)
        direction_state = (direction_state + direction(word, dimension) + 1) % dimension
    return point


def hilbert_index(dimension: int, order: int, point) -> int:
    """
    Индекс N-D точки на кривой Hilbert.

    Args:
        dimension: Размерность
        order: Порядок (сторона 2^order)
        point: `dimension` координат в [0, 2^order)

    Returns:
        Индекс в [0, 2^(order * dimension))
    """
    index_acc = 0
    entry_state = 0
    direction_state = 0
    for order_idx in range(order):
        label = 0
        for coord in range(dimension):
            bit_val = bitrange(point[dimension - coord - 1], order, order_idx, order_idx + 1)
            label |= bit_val << coord
        label = transform(entry_state, direction_state, dimension, label)

        word = igraycode(label)
        entry_state ^= lrot(entry(word), direction_state + 1, dimension)
        direction_state = (direction_state + direction(word, dimension) + 1) % dimension
        index_acc = (index_acc << dimension) | word
    return index_acc
