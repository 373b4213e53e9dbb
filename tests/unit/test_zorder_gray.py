"""
Тесты для Z-order и Gray code — биективные, но не непрерывные кривые
"""

import pytest

from spacecurve.core.domain import Point
from spacecurve.core.errors import SizeError
from spacecurve.core.math.bit_ops import graycode
from spacecurve.curves import GrayCurve, ZOrder


class TestZOrder:
    """Morton-кривая."""

    def test_first_quad(self):
        curve = ZOrder.from_dimensions(2, 4)
        assert [curve.point(i).as_list() for i in range(4)] == [[0, 0], [1, 0], [0, 1], [1, 1]]

    def test_not_continuous(self):
        """Соседние индексы 1 и 2 дают диагональный шаг."""
        curve = ZOrder.from_dimensions(2, 4)
        assert curve.point(1).distance(curve.point(2)) > 1.0

    def test_one_dimension_is_identity(self):
        curve = ZOrder.from_dimensions(1, 8)
        assert [curve.point(i)[0] for i in range(8)] == list(range(8))

    def test_rejects_non_power_of_two(self):
        with pytest.raises(SizeError):
            ZOrder.from_dimensions(2, 5)

    @pytest.mark.parametrize("dimension,size", [(2, 4), (2, 16), (3, 4), (4, 2), (5, 4)])
    def test_roundtrip(self, dimension, size):
        curve = ZOrder.from_dimensions(dimension, size)
        for i in range(curve.length()):
            assert curve.index(curve.point(i)) == i


class TestGrayCurve:
    """Gray code кривая."""

    def test_consecutive_morton_codes_differ_in_one_bit(self):
        curve = GrayCurve.from_dimensions(2, 8)
        for i in range(1, curve.length()):
            assert (graycode(i) ^ graycode(i - 1)).bit_count() == 1
            assert curve.point(i) != curve.point(i - 1)

    def test_not_continuous(self):
        """Индексы 3 и 4: [0, 1] → [2, 1]."""
        curve = GrayCurve.from_dimensions(2, 4)
        assert curve.point(3) == Point.new([0, 1])
        assert curve.point(4) == Point.new([2, 1])
        assert curve.point(3).distance(curve.point(4)) == 2.0

    @pytest.mark.parametrize("dimension,size", [(2, 4), (2, 16), (3, 4), (4, 2)])
    def test_roundtrip(self, dimension, size):
        curve = GrayCurve.from_dimensions(dimension, size)
        for i in range(curve.length()):
            assert curve.index(curve.point(i)) == i

    def test_name(self):
        assert GrayCurve.from_dimensions(2, 2).name() == "Gray code"
