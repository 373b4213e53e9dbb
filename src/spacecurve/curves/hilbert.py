"""
Hilbert — непрерывная кривая для решёток 2^order в любой размерности

Выбор реализации выполняется один раз в конструкторе:
- HilbertImpl.TWO_D: специализированный автомат (hilbert2)
- HilbertImpl.ND: обобщённое отображение Hamilton (hilbertn)
"""

from enum import Enum

from spacecurve.core.domain.grid_spec import INDEX_BITS, GridSpec
from spacecurve.core.domain.point import Point
from spacecurve.curves import hilbert2, hilbertn
from spacecurve.curves.base import SpaceCurve


class HilbertImpl(str, Enum):
    """Реализация отображения Hilbert."""

    TWO_D = "2d"
    ND = "nd"

    def index(self, dimension: int, order: int, point) -> int:
        if self is HilbertImpl.TWO_D:
            return hilbert2.hilbert_index(order, point)
        return hilbertn.hilbert_index(dimension, order, point)

    def point(self, dimension: int, order: int, index: int) -> list[int]:
        if self is HilbertImpl.TWO_D:
            return hilbert2.hilbert_point(order, index)
        return hilbertn.hilbert_point(dimension, order, index)


class Hilbert(SpaceCurve):
    """
    Кривая Hilbert.

    Attributes:
        order: Порядок кривой (size == 2^order)
        dimension: Размерность
        size: Сторона решётки
        mapper: Выбранная реализация (TWO_D для D == 2, иначе ND)
    """

    def __init__(self, spec: GridSpec):
        assert spec.order is not None, "Hilbert requires a power-of-two grid"
        self.dimension = spec.dimension
        self.order = spec.order
        self.size = spec.size
        self._length = spec.length
        self.mapper = HilbertImpl.TWO_D if spec.dimension == 2 else HilbertImpl.ND

    @classmethod
    def grid_spec(cls, dimension: int, size: int) -> GridSpec:
        """
        Проверка решётки `size`^`dimension` без построения кривой.

        Raises:
            ShapeError: dimension < 2 или >= 32
            SizeError: size не степень двойки или индекс не помещается в 32 бита
        """
        spec = GridSpec.power_of_two(dimension, size)
        spec.require_index_bits_lt(INDEX_BITS)
        return spec

    @classmethod
    def from_dimensions(cls, dimension: int, size: int) -> "Hilbert":
        return cls(cls.grid_spec(dimension, size))

    def name(self) -> str:
        return "Hilbert"

    def info(self) -> str:
        return (
            "Classic continuous space-filling curve with excellent locality.\n"
            "Defined recursively via rotations/reflections; widely used in GIS,\n"
            "image storage, and indexing; typically clusters better than Z-order."
        )

    def length(self) -> int:
        return self._length

    def dimensions(self) -> int:
        return self.dimension

    def index(self, point: Point) -> int:
        self._check_point(point)
        return self.mapper.index(self.dimension, self.order, point.coords)

    def point(self, index: int) -> Point:
        self._check_index(index)
        coords = self.mapper.point(self.dimension, self.order, index % self._length)
        return Point.with_dimension(self.dimension, coords)
