"""
Scan — N-мерный бустрофедон (растр с чередованием направления)

Индекс: число в системе счисления с основанием size, ось 0 соответствует
младшей цифре. Блок младших осей проходится в обратном порядке, когда сумма
координат старших осей нечётна (отражённый код Грея со смешанным
основанием). Непрерывна в любой размерности при любом size >= 1.
"""

from spacecurve.core.domain.grid_spec import GridSpec
from spacecurve.core.domain.point import Point
from spacecurve.curves.base import SpaceCurve


class Scan(SpaceCurve):
    """Бустрофедон для решётки `size`^`dimension`."""

    MIN_DIMENSION = 1

    def __init__(self, spec: GridSpec):
        self.dimension = spec.dimension
        self.size = spec.size
        self._length = spec.length

    @classmethod
    def grid_spec(cls, dimension: int, size: int) -> GridSpec:
        """
        Raises:
            ShapeError: dimension < 1 или >= 32
            SizeError: size < 1 или size^dimension не помещается в индекс
        """
        return GridSpec.any_size(dimension, size, min_dimension=cls.MIN_DIMENSION)

    @classmethod
    def from_dimensions(cls, dimension: int, size: int) -> "Scan":
        return cls(cls.grid_spec(dimension, size))

    def name(self) -> str:
        return "Scan"

    def info(self) -> str:
        return (
            "Boustrophedon raster scan generalised to N dimensions: each row\n"
            "reverses direction so consecutive points stay adjacent. Works\n"
            "for any grid size, with poor locality across rows."
        )

    def length(self) -> int:
        return self._length

    def dimensions(self) -> int:
        return self.dimension

    def point(self, index: int) -> Point:
        self._check_index(index)
        side = self.size
        coords = [0] * self.dimension
        reversed_ = False
        stride = self._length // side
        for axis in range(self.dimension - 1, -1, -1):
            raw = (index // stride) % side
            coord = side - 1 - raw if reversed_ else raw
            coords[axis] = coord
            if coord % 2:
                reversed_ = not reversed_
            stride //= side
        return Point.with_dimension(self.dimension, coords)

    def index(self, point: Point) -> int:
        self._check_point(point)
        side = self.size
        result = 0
        reversed_ = False
        for axis in range(self.dimension - 1, -1, -1):
            coord = point[axis]
            raw = side - 1 - coord if reversed_ else coord
            result = result * side + raw
            if coord % 2:
                reversed_ = not reversed_
        return result
