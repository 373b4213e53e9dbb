"""
Z-order (Morton) — индекс как чередование битов координат

Биекция по построению, но без непрерывности: соседние индексы могут
соответствовать далёким точкам.
"""

from spacecurve.core.domain.grid_spec import GridSpec
from spacecurve.core.domain.point import Point
from spacecurve.core.math.morton import deinterleave_lsb, interleave_lsb
from spacecurve.curves.base import SpaceCurve


class ZOrder(SpaceCurve):
    """Кривая Z-order для гиперкуба 2^order."""

    # Обобщённый путь morton покрывает и D = 1
    MIN_DIMENSION = 1

    def __init__(self, spec: GridSpec):
        assert spec.order is not None, "Z-order requires a power-of-two grid"
        self.dimension = spec.dimension
        self.order = spec.order
        self.size = spec.size
        self._length = spec.length

    @classmethod
    def grid_spec(cls, dimension: int, size: int) -> GridSpec:
        """
        Raises:
            ShapeError: dimension < 1 или >= 32
            SizeError: size не степень двойки или order * dimension >= 32
        """
        return GridSpec.power_of_two(dimension, size, min_dimension=cls.MIN_DIMENSION)

    @classmethod
    def from_dimensions(cls, dimension: int, size: int) -> "ZOrder":
        return cls(cls.grid_spec(dimension, size))

    def name(self) -> str:
        return "Z-order"

    def info(self) -> str:
        return (
            "Morton order: the index interleaves the bits of all coordinates.\n"
            "Cheap to compute and cache friendly, but not continuous:\n"
            "consecutive indices may jump across the grid."
        )

    def length(self) -> int:
        return self._length

    def dimensions(self) -> int:
        return self.dimension

    def point(self, index: int) -> Point:
        self._check_index(index)
        return Point.with_dimension(
            self.dimension, deinterleave_lsb(self.dimension, self.order, index)
        )

    def index(self, point: Point) -> int:
        self._check_point(point)
        return interleave_lsb(point.coords, self.order)
