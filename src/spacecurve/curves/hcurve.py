"""
H-curve — обобщение Niedermeier–Reinhardt–Sanders для N измерений

Построение по работе Netay (Cyclic space-filling curves and their clustering
property) с исправленной парой Gray/inverse Gray:
- кодирование (point → index) использует обратный Gray code цифры alpha
- декодирование (index → point) использует прямой Gray code

Обозначения в низкоуровневых функциях:
    d: размерность
    n: порядок (число битов на координату)

Таблица углов corners[k][j] (k = 0..n, j < 2^(d+1)):
- corners[0][i]        = grey(i)            (нижняя половина)
- corners[0][grey(i) + 2^d] = i             (верхняя половина, inverse Gray)
- corners[k][r]        = индекс входного угла r на уровне k
- corners[k][r + 2^d]  = индекс выходного угла (последняя alpha ^ 1)

Аккумулятор: неограниченный Python int; на каждом уровне он приводится по
модулю размера подъячейки 2^(d*k).

Непрерывность: чётная размерность при любом порядке и нечётная размерность
порядка 1. Для нечётной размерности >= 3 при порядке >= 2 правило сдвига не
сохраняет смежность на стыках подъячеек: кривая остаётся биекцией, но
содержит прыжки (3D size 4: четыре прыжка, первый на индексе 7).
"""

import logging
from typing import Sequence

from spacecurve.core.domain.grid_spec import GridSpec
from spacecurve.core.domain.point import Point
from spacecurve.core.errors import ShapeError, SizeError
from spacecurve.core.math.bit_ops import bit_transpose, parity
from spacecurve.curves.base import SpaceCurve

logger = logging.getLogger(__name__)

Corners = list[list[int]]


def grey(d: int, val: int) -> int:
    """BRGC значения `val`, ограниченного `d` битами."""
    masked = val & ((1 << d) - 1)
    return masked ^ (masked >> 1)


def cached_grey(d: int, val: int, corners: Corners) -> int:
    return corners[0][val]


def cached_inv_grey(d: int, val: int, corners: Corners) -> int:
    return corners[0][val + (1 << d)]


def corner_indexes(d: int, n: int) -> Corners:
    """
    Построение таблиц индексов углов для размерности `d` и порядка `n`.

    Уровень k строится через h_index_alphas с уже заполненными уровнями < k.

    Returns:
        n + 1 строк по 2^(d+1) значений
    """
    size = 1 << d
    v = [[0] * (size * 2) for _ in range(n + 1)]

    for i in range(size):
        g = grey(d, i)
        v[0][g + size] = i
        v[0][i] = g

    for n1 in range(1, n + 1):
        for r in range(size):
            # Входной угол: все alpha равны r
            alphas = [r] * n1
            v[n1][r] = h_index_alphas(d, n1, alphas, v)

            # Выходной угол: последняя alpha отражена
            alphas[n1 - 1] ^= 1
            v[n1][r + size] = h_index_alphas(d, n1, alphas, v)
    return v


def _corner_shift(d: int, n: int, k: int, alpha: int, corners: Corners) -> int:
    two_power_d = 1 << d
    alpha_inv = alpha ^ (two_power_d - 1)
    need_to_change_last = 1 ^ parity(alpha_inv)
    shift = corners[k][alpha_inv + two_power_d * need_to_change_last]

    # Правило обращения для нечётной размерности первого порядка
    if d % 2 == 1 and n == 1:
        shift = (shift ^ (two_power_d - 1)) + 1
    return shift


def h_index_alphas(d: int, n: int, alphas: Sequence[int], corners: Corners) -> int:
    """
    Индекс по цифрам alpha (n цифр по d битов, старшая первой).

    Обход от младшей цифры (i = n - 1) к старшей (i = 0).
    """
    assert len(alphas) == n, f"expected {n} alpha digits, got {len(alphas)}"
    two_power_d = 1 << d
    r = 0
    for i in range(n - 1, -1, -1):
        alpha = alphas[i] % two_power_d
        k = n - 1 - i
        shift = _corner_shift(d, n, k, alpha, corners)

        sub_cell_size = 1 << (d * k)
        r = (r - shift) % sub_cell_size
        r += cached_inv_grey(d, alpha, corners) * sub_cell_size
    return r


def h_index(d: int, n: int, p: Sequence[int], corners: Corners) -> int:
    """Индекс точки: координаты (d по n битов) транспонируются в alpha (n по d)."""
    assert len(p) == d, f"expected {d} coordinates, got {len(p)}"
    return h_index_alphas(d, n, bit_transpose(n, p), corners)


def h_point(d: int, n: int, idx: int, corners: Corners) -> list[int]:
    """Точка по индексу: цифры alpha от старшей к младшей, затем транспонирование."""
    alphas = [0] * n
    two_power_d = 1 << d
    r = idx
    for i in range(n):
        k = n - 1 - i
        r0 = (r >> (k * d)) % two_power_d

        alpha = cached_grey(d, r0, corners)
        alphas[i] = alpha

        r += _corner_shift(d, n, k, alpha, corners)
    return bit_transpose(d, alphas)


class HCurve(SpaceCurve):
    """
    H-curve для гиперкуба 2^order в `dimension` измерениях.

    Непрерывна при чётной размерности и при order <= 1; нечётная размерность
    >= 3 при order >= 2 даёт биекцию с прыжками.

    Таблица углов строится один раз в конструкторе и дальше только читается.
    """

    def __init__(self, spec: GridSpec):
        assert spec.order is not None, "H-curve requires a power-of-two grid"
        self.dimension = spec.dimension
        self.order = spec.order
        self.size = spec.size
        self._length = spec.length
        self._corners = corner_indexes(self.dimension, self.order)
        logger.debug(
            "H-curve corner table built: dimension=%d order=%d rows=%d",
            self.dimension,
            self.order,
            len(self._corners),
        )

    @classmethod
    def grid_spec(cls, dimension: int, size: int) -> GridSpec:
        """
        Проверка решётки `size`^`dimension` без построения таблицы углов.

        Raises:
            ShapeError: dimension < 2 или >= 32
            SizeError: size не степень двойки или order * dimension >= 32
        """
        if dimension < 2:
            raise ShapeError(f"Dimension must be >= 2, got {dimension}")
        spec = GridSpec.power_of_two(dimension, size)
        if dimension >= 32:
            raise ShapeError(f"Dimension must be < 32, got {dimension}")
        if spec.order * dimension >= 32:
            raise SizeError("Curve size exceeds index limits (D*O must be < 32)")
        return spec

    @classmethod
    def from_dimensions(cls, dimension: int, size: int) -> "HCurve":
        return cls(cls.grid_spec(dimension, size))

    def name(self) -> str:
        return "H-curve"

    def info(self) -> str:
        return (
            "Hilbert-like family based on Binary Reflected Gray Code with\n"
            "orientation transforms (Niedermeier–Reinhardt–Sanders; Netay).\n"
            "Continuous on 2^n grids in even dimensions and at order 1; odd\n"
            "dimensions >= 3 at order >= 2 stay bijective but contain jumps.\n"
            "Offers strong locality with relatively simple bit operations."
        )

    def length(self) -> int:
        return self._length

    def dimensions(self) -> int:
        return self.dimension

    def point(self, index: int) -> Point:
        self._check_index(index)
        coords = h_point(self.dimension, self.order, index, self._corners)
        return Point.with_dimension(self.dimension, coords)

    def index(self, point: Point) -> int:
        self._check_point(point)
        return h_index(self.dimension, self.order, point.coords, self._corners)
