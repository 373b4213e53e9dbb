"""
Общие помощники 2D и N-D реализаций Hilbert.

Маски, повороты и диапазоны битов живут в core.math.bit_ops; здесь только
двухбитовые операции автомата 2D.
"""

from spacecurve.core.math.bit_ops import graycode


def rot2(label: int) -> int:
    """
    Поворот двухбитовой метки автомата 2D Hilbert (обмен битов).

    Examples:
        >>> rot2(1)
        2
        >>> rot2(3)
        3
    """
    label &= 3
    if label == 1:
        return 2
    if label == 2:
        return 1
    return label


def gray2(word: int) -> int:
    """Gray code, ограниченный двумя младшими битами."""
    return graycode(word) & 3
