"""
Point — N-мерная точка целочисленной решётки

Immutable Pydantic модель: упорядоченная последовательность неотрицательных
координат, по одной на ось. Универсальный тип значения на границе между
кривыми и их потребителями (CLI, GUI, рендерер).

Две точки равны тогда и только тогда, когда совпадают все координаты.
"""

import math
from typing import Iterable, Iterator

from pydantic import BaseModel, Field, NonNegativeInt


class Point(BaseModel):
    """
    Точка N-мерной решётки.

    Immutable модель (frozen=True): любые "изменения" создают новый экземпляр.
    Поддерживает индексирование, len() и итерацию по координатам.
    """

    coords: tuple[NonNegativeInt, ...] = Field(..., description="Координаты по осям")

    model_config = {"frozen": True}

    @classmethod
    def new(cls, coords: Iterable[int]) -> "Point":
        """
        Создание точки из последовательности координат.

        Args:
            coords: Координаты (любой iterable из неотрицательных int)

        Returns:
            Новая точка
        """
        return cls(coords=tuple(coords))

    @classmethod
    def with_dimension(cls, dimension: int, coords: Iterable[int]) -> "Point":
        """
        Создание точки с проверкой числа координат.

        Проверка выполняется через assert и отключается при `python -O`.

        Args:
            dimension: Ожидаемая размерность
            coords: Координаты

        Returns:
            Новая точка
        """
        point = cls.new(coords)
        assert len(point.coords) == dimension, (
            f"Point dimension mismatch: expected {dimension}, got {len(point.coords)}"
        )
        return point

    def __getitem__(self, item):
        return self.coords[item]

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.coords)

    def dimension(self) -> int:
        """Размерность точки."""
        return len(self.coords)

    def as_list(self) -> list[int]:
        """Координаты в виде нового списка."""
        return list(self.coords)

    def distance(self, other: "Point") -> float:
        """
        Евклидово расстояние до другой точки той же размерности.

        Сумма квадратов считается в целых числах без потери точности, корень
        извлекается в конце. Несовпадение размерностей — нарушение контракта
        (assert); без assert используется общий префикс координат.

        Args:
            other: Вторая точка

        Returns:
            Расстояние (0.0 для совпадающих точек)

        Examples:
            >>> Point.new([2, 2]).distance(Point.new([2, 1]))
            1.0
        """
        assert len(self.coords) == len(other.coords), (
            f"Point.distance called with differing dimensions: "
            f"{len(self.coords)} vs {len(other.coords)}"
        )
        total = 0
        for a, b in zip(self.coords, other.coords):
            delta = a - b
            total += delta * delta
        return math.sqrt(total)
