"""
2D Hilbert — автомат на четырёх состояниях

Состояние: entry (угол входа, 0..3) и direction (ориентация, 0/1).
На каждом уровне из пары битов (y, x) строится метка, метка переводится в
двухбитовое слово индекса через rot2/gray2. Слова 0 и 3 (угловые подъячейки)
меняют ориентацию, слово 3 дополнительно отражает угол входа.
"""


from spacecurve.curves.hilbert_common import gray2, rot2


def hilbert_index(order: int, point) -> int:
    """
    Индекс 2D точки на кривой Hilbert порядка `order`.

    Args:
        order: Порядок кривой (сторона 2^order)
        point: Координаты [x, y]

    Returns:
        Индекс в [0, 4^order)

    Examples:
        >>> hilbert_index(3, [5, 6])
        45
    """
    index_acc = 0
    entry_state = 0
    direction_state = 0
    for step in range(order):
        bit_offset = order - step - 1
        a_bit = (point[1] >> bit_offset) & 1
        b_bit = (point[0] >> bit_offset) & 1
        label = (a_bit | b_bit << 1) ^ entry_state
        if direction_state == 0:
            word = gray2(rot2(label))
        else:
            word = gray2(label)
        if word == 3:
            entry_state = 3 - entry_state
        index_acc = (index_acc << 2) | word
        if word == 0 or word == 3:
            direction_state ^= 1
    return index_acc


def hilbert_point(order: int, index: int) -> list[int]:
    """
    2D точка кривой Hilbert порядка `order` для индекса `index`.

    Examples:
        >>> hilbert_point(3, 45)
        [5, 6]
    """
    hwidth = order * 2
    entry_state = 0
    direction_state = 0
    x_coord = 0
    y_coord = 0
    for step in range(order):
        word = (index >> (hwidth - step * 2 - 2)) & 3

        if direction_state == 0:
            label = rot2(gray2(word)) ^ entry_state
        else:
            label = gray2(word) ^ entry_state

        bit_mask = 1 << (order - step - 1)
        if label & 2:
            x_coord |= bit_mask
        if label & 1:
            y_coord |= bit_mask

        if word == 3:
            entry_state = 3 - entry_state
        if word == 0 or word == 3:
            direction_state ^= 1
    return [x_coord, y_coord]
