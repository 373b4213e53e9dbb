"""
Gray code curve — Morton-отображение Gray-кода индекса

point(i) = deinterleave(graycode(i)), index(p) = igraycode(interleave(p)).
Соседние индексы дают Morton-коды, отличающиеся одним битом, но один бит
старшего разряда координаты — это прыжок, поэтому кривая не непрерывна.
"""

from spacecurve.core.domain.grid_spec import GridSpec
from spacecurve.core.domain.point import Point
from spacecurve.core.math.bit_ops import graycode, igraycode
from spacecurve.core.math.morton import deinterleave_lsb, interleave_lsb
from spacecurve.curves.base import SpaceCurve


class GrayCurve(SpaceCurve):
    MIN_DIMENSION = 1

    def __init__(self, spec: GridSpec):
        assert spec.order is not None, "Gray code curve requires a power-of-two grid"
        self.dimension = spec.dimension
        self.order = spec.order
        self.size = spec.size
        self._length = spec.length

    @classmethod
    def grid_spec(cls, dimension: int, size: int) -> GridSpec:
        return GridSpec.power_of_two(dimension, size, min_dimension=cls.MIN_DIMENSION)

    @classmethod
    def from_dimensions(cls, dimension: int, size: int) -> "GrayCurve":
        return cls(cls.grid_spec(dimension, size))

    def name(self) -> str:
        return "Gray code"

    def info(self) -> str:
        return (
            "Binary Reflected Gray Code applied to the Morton index.\n"
            "Consecutive points differ in a single coordinate bit, which\n"
            "keeps small moves local but still allows large jumps."
        )

    def length(self) -> int:
        return self._length

    def dimensions(self) -> int:
        return self.dimension

    def point(self, index: int) -> Point:
        self._check_index(index)
        coords = deinterleave_lsb(self.dimension, self.order, graycode(index))
        return Point.with_dimension(self.dimension, coords)

    def index(self, point: Point) -> int:
        self._check_point(point)
        return igraycode(interleave_lsb(point.coords, self.order))
