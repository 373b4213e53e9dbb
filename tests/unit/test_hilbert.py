"""
Тесты для Hilbert — 2D автомат и N-D отображение Hamilton

Проверяемые инварианты:
1. Литерал: order 3, [5, 6] ↔ 45
2. index(point(i)) == i для всех i на малых порядках
3. transform/itransform взаимно обратны (значения из Hamilton, p. 18)
4. Выбор реализации: TWO_D только для D == 2
"""

import pytest

from spacecurve.core.domain import Point
from spacecurve.core.errors import ShapeError, SizeError
from spacecurve.curves import Hilbert, HilbertImpl
from spacecurve.curves import hilbert2, hilbertn
from spacecurve.curves.hilbert_common import gray2, rot2


# =============================================================================
# ТЕСТЫ: 2D автомат
# =============================================================================


class TestHilbert2D:
    """Специализированная 2D реализация."""

    def test_rot2(self):
        assert rot2(0) == 0
        assert rot2(1) == 2
        assert rot2(2) == 1
        assert rot2(3) == 3

    def test_gray2(self):
        assert gray2(1) == 1
        assert gray2(3) == 2

    def test_literal_index(self):
        """Известный пример: order 3, [5, 6] ↔ 45."""
        assert hilbert2.hilbert_index(3, [5, 6]) == 45
        assert hilbert2.hilbert_point(3, 45) == [5, 6]

    def test_order_one_sequence(self):
        """Порядок 1: U-образный обход квадрата 2x2."""
        points = [hilbert2.hilbert_point(1, i) for i in range(4)]
        assert points == [[0, 0], [1, 0], [1, 1], [0, 1]]

    @pytest.mark.parametrize("order", [2, 3, 4])
    def test_symmetry(self, order):
        """index(point(i)) == i на всём диапазоне."""
        for i in range(4**order):
            p = hilbert2.hilbert_point(order, i)
            assert hilbert2.hilbert_index(order, p) == i


# =============================================================================
# ТЕСТЫ: N-D отображение
# =============================================================================


class TestHilbertND:
    """Обобщённая реализация Hamilton."""

    def test_transform(self):
        """Значения из примера на p. 18 Hamilton."""
        assert hilbertn.transform(0, 1, 2, 3) == 3
        assert hilbertn.transform(3, 0, 2, 2) == 2
        assert hilbertn.transform(3, 0, 2, 1) == 1

    def test_itransform_inverts_transform(self):
        for width in (2, 3, 4):
            for e in range(1 << width):
                for d in range(width):
                    for x in range(1 << width):
                        t = hilbertn.transform(e, d, width, x)
                        assert hilbertn.itransform(e, d, width, t) == x

    def test_entry(self):
        assert hilbertn.entry(0) == 0
        assert hilbertn.entry(1) == 0
        assert hilbertn.entry(2) == 0
        assert hilbertn.entry(3) == 3
        assert hilbertn.entry(4) == 3
        assert hilbertn.entry(5) == 6

    def test_direction(self):
        assert hilbertn.direction(0, 2) == 0
        assert hilbertn.direction(1, 2) == 1
        assert hilbertn.direction(2, 2) == 1
        assert hilbertn.direction(3, 2) == 0

    @pytest.mark.parametrize("dimension", [2, 3, 4])
    def test_symmetry(self, dimension):
        """index(point(i)) == i для order 3."""
        order = 3
        for i in range(2 ** (dimension * order)):
            p = hilbertn.hilbert_point(dimension, order, i)
            assert len(p) == dimension
            assert hilbertn.hilbert_index(dimension, order, p) == i


# =============================================================================
# ТЕСТЫ: Hilbert (класс)
# =============================================================================


class TestHilbertCurve:
    """Построение и интерфейс SpaceCurve."""

    def test_from_dimensions(self):
        h = Hilbert.from_dimensions(2, 2)
        assert h.order == 1
        assert h.length() == 4
        assert len(h) == 4

        h = Hilbert.from_dimensions(3, 2)
        assert h.order == 1
        assert h.length() == 8
        assert h.dimensions() == 3

    def test_rejects_non_power_of_two(self):
        with pytest.raises(SizeError):
            Hilbert.from_dimensions(2, 3)

    def test_rejects_one_dimension(self):
        with pytest.raises(ShapeError):
            Hilbert.from_dimensions(1, 4)

    def test_index_overflow_guard(self):
        """2D order 16 дал бы длину 2^32."""
        with pytest.raises(SizeError):
            Hilbert.from_dimensions(2, 1 << 16)
        h = Hilbert.from_dimensions(2, 1 << 15)
        assert h.length() == 1 << 30

    def test_mapper_selection(self):
        assert Hilbert.from_dimensions(2, 4).mapper is HilbertImpl.TWO_D
        assert Hilbert.from_dimensions(3, 4).mapper is HilbertImpl.ND
        assert Hilbert.from_dimensions(4, 2).mapper is HilbertImpl.ND

    def test_literal_through_curve(self):
        h = Hilbert.from_dimensions(2, 8)
        assert h.index(Point.new([5, 6])) == 45
        assert h.point(45) == Point.new([5, 6])

    def test_index_ten_roundtrip(self):
        h = Hilbert.from_dimensions(2, 8)
        assert h.index(h.point(10)) == 10

    def test_points_generator(self):
        """points() отдаёт отрезок кривой и обрезается по длине."""
        h = Hilbert.from_dimensions(2, 2)
        assert [p.as_list() for p in h.points()] == [[0, 0], [1, 0], [1, 1], [0, 1]]
        assert [p.as_list() for p in h.points(2, 100)] == [[1, 1], [0, 1]]

    def test_large_curve_sampled(self):
        """Крупная 2D кривая: выборочные индексы."""
        h = Hilbert.from_dimensions(2, 1 << 15)
        for i in (0, 1, 12345, (1 << 29) + 7, (1 << 30) - 1):
            assert h.index(h.point(i)) == i

    def test_info(self):
        h = Hilbert.from_dimensions(2, 4)
        assert h.name() == "Hilbert"
        assert "locality" in h.info()

    def test_out_of_range_index_asserts(self):
        h = Hilbert.from_dimensions(2, 4)
        with pytest.raises(AssertionError):
            h.point(16)

    def test_out_of_grid_point_asserts(self):
        h = Hilbert.from_dimensions(2, 4)
        with pytest.raises(AssertionError):
            h.index(Point.new([4, 0]))
