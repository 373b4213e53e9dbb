"""
Onion и HairyOnion — обход гиперкуба концентрическими оболочками

Onion проходит оболочки снаружи внутрь; внутренний куб стороны size - 2
сдвинут на 1 по всем осям.

Оболочка в 2D — кольцо, начинающееся в углу (0, 0): вверх по оси 1, вдоль
оси 0, вниз по оси 1 и обратно. Кольцо заканчивается в (1, 0), рядом с
началом следующего кольца (1, 1), поэтому 2D Onion непрерывна.

Оболочка при d >= 3:
1. грань x0 = 0: полная (d-1)-мерная Onion по осям 1..d-1
2. грань x0 = size - 1: то же самое
3. трубка x0 in [1, size - 2] x оболочка (d-1)-куба, по одной линии оси 0
   на каждую точку оболочки
Между сегментами возникают прыжки: при d >= 3 Onion не непрерывна.

HairyOnion: сечение по осям 1..d-1 обходится (Hairy)Onion-порядком, и из
каждой клетки сечения растёт "волос" вдоль оси 0. Волосы проходятся в
чередующемся направлении, конец одного соседствует с началом следующего.
В 2D совпадает с Onion. Непрерывна в любой размерности.
"""

from typing import Sequence

from spacecurve.core.domain.grid_spec import GridSpec
from spacecurve.core.domain.point import Point
from spacecurve.curves.base import SpaceCurve

# =============================================================================
# 2D RING
# =============================================================================


def ring_point(side: int, t: int) -> list[int]:
    """Точка `t` кольца стороны `side` (side == 1 — единственная точка)."""
    if side == 1:
        return [0, 0]
    e = side - 1
    if t < e:
        return [0, t]
    if t < 2 * e:
        return [t - e, e]
    if t < 3 * e:
        return [e, e - (t - 2 * e)]
    return [e - (t - 3 * e), 0]


def ring_index(side: int, a: int, b: int) -> int:
    """Позиция точки (a, b) на кольце стороны `side`."""
    if side == 1:
        return 0
    e = side - 1
    if a == 0:
        return b
    if b == e:
        return e + a
    if a == e:
        return 2 * e + (e - b)
    return 3 * e + (e - a)


# =============================================================================
# SHELLS
# =============================================================================


def shell_size(dimension: int, side: int) -> int:
    """Число точек на внешней оболочке куба `side`^`dimension`."""
    if side == 1:
        return 1
    return side**dimension - (side - 2) ** dimension


def shell_point(dimension: int, side: int, t: int) -> list[int]:
    if side == 1:
        return [0] * dimension
    if dimension == 2:
        return ring_point(side, t)

    face = side ** (dimension - 1)
    if t < face:
        return [0] + onion_point(dimension - 1, side, t)
    if t < 2 * face:
        return [side - 1] + onion_point(dimension - 1, side, t - face)
    k, r = divmod(t - 2 * face, side - 2)
    return [r + 1] + shell_point(dimension - 1, side, k)


def shell_index(dimension: int, side: int, p: Sequence[int]) -> int:
    if side == 1:
        return 0
    if dimension == 2:
        return ring_index(side, p[0], p[1])

    face = side ** (dimension - 1)
    x0 = p[0]
    rest = p[1:]
    if x0 == 0:
        return onion_index(dimension - 1, side, rest)
    if x0 == side - 1:
        return face + onion_index(dimension - 1, side, rest)
    return 2 * face + shell_index(dimension - 1, side, rest) * (side - 2) + (x0 - 1)


# =============================================================================
# ONION
# =============================================================================


def onion_point(dimension: int, side: int, t: int) -> list[int]:
    """
    Точка `t` Onion-обхода куба `side`^`dimension`.

    Оболочки снимаются снаружи внутрь, пока `t` не попадёт в текущую.
    """
    layer = 0
    current = side
    while t >= shell_size(dimension, current):
        t -= shell_size(dimension, current)
        current -= 2
        layer += 1
    return [c + layer for c in shell_point(dimension, current, t)]


def onion_index(dimension: int, side: int, p: Sequence[int]) -> int:
    """
    Индекс точки в Onion-обходе.

    Номер оболочки — расстояние до ближайшей грани; все внешние оболочки
    вместе содержат side^d - inner^d точек.
    """
    layer = min(min(c, side - 1 - c) for c in p)
    inner = side - 2 * layer
    local = [c - layer for c in p]
    return side**dimension - inner**dimension + shell_index(dimension, inner, local)


def hairy_point(dimension: int, side: int, t: int) -> list[int]:
    if dimension == 2:
        return onion_point(2, side, t)
    k, r = divmod(t, side)
    x = r if k % 2 == 0 else side - 1 - r
    return [x] + hairy_point(dimension - 1, side, k)


def hairy_index(dimension: int, side: int, p: Sequence[int]) -> int:
    if dimension == 2:
        return onion_index(2, side, p)
    k = hairy_index(dimension - 1, side, p[1:])
    x = p[0]
    return k * side + (x if k % 2 == 0 else side - 1 - x)


# =============================================================================
# CURVES
# =============================================================================


class Onion(SpaceCurve):
    """
    Onion-кривая для решётки `size`^`dimension` (dimension >= 2).

    Непрерывна только в 2D.
    """

    MIN_DIMENSION = 2

    def __init__(self, spec: GridSpec):
        self.dimension = spec.dimension
        self.size = spec.size
        self._length = spec.length

    @classmethod
    def grid_spec(cls, dimension: int, size: int) -> GridSpec:
        """
        Raises:
            ShapeError: dimension < 2 или >= 32
            SizeError: size < 1 или size^dimension не помещается в индекс
        """
        return GridSpec.any_size(dimension, size, min_dimension=cls.MIN_DIMENSION)

    @classmethod
    def from_dimensions(cls, dimension: int, size: int) -> "Onion":
        return cls(cls.grid_spec(dimension, size))

    def name(self) -> str:
        return "Onion"

    def info(self) -> str:
        return (
            "Traverses concentric shells of the hypercube from the outside in.\n"
            "Continuous in 2D for any size; in higher dimensions the faces of\n"
            "each shell are joined by axis-aligned jumps."
        )

    def length(self) -> int:
        return self._length

    def dimensions(self) -> int:
        return self.dimension

    def point(self, index: int) -> Point:
        self._check_index(index)
        return Point.with_dimension(
            self.dimension, onion_point(self.dimension, self.size, index)
        )

    def index(self, point: Point) -> int:
        self._check_point(point)
        return onion_index(self.dimension, self.size, point.coords)


class HairyOnion(Onion):
    """Onion-сечение с "волосами" вдоль оси 0; непрерывна в любой размерности."""

    def name(self) -> str:
        return "Hairy Onion"

    def info(self) -> str:
        return (
            "Experimental onion variant: the cross-section is walked in onion\n"
            "order and every cell grows a hair along the first axis, walked\n"
            "in alternating directions. Continuous in every dimension."
        )

    def point(self, index: int) -> Point:
        self._check_index(index)
        return Point.with_dimension(
            self.dimension, hairy_point(self.dimension, self.size, index)
        )

    def index(self, point: Point) -> int:
        self._check_point(point)
        return hairy_index(self.dimension, self.size, point.coords)
