"""
SpaceCurve — общий интерфейс всех семейств кривых

Кривая — биекция между линейным индексом [0, length) и точками решётки
[0, size)^dimension. Потребители (CLI, GUI, рендерер) работают с кривыми
только через этот интерфейс.

Предусловия point()/index() проверяются через assert и отключаются при
`python -O`: корректность запроса гарантирует конструктор (GridSpec).
"""

from abc import ABC, abstractmethod
from typing import Iterator

from spacecurve.core.domain.point import Point


class SpaceCurve(ABC):
    """
    Абстрактная space-filling curve.

    Экземпляры неизменяемы после конструктора и могут разделяться между
    потоками. Атрибут `size` — сторона решётки по каждой оси.
    """

    size: int

    @abstractmethod
    def name(self) -> str:
        """Человекочитаемое имя семейства."""

    @abstractmethod
    def info(self) -> str:
        """Краткое описание свойств кривой."""

    @abstractmethod
    def length(self) -> int:
        """Общее число точек кривой."""

    @abstractmethod
    def dimensions(self) -> int:
        """Размерность решётки."""

    @abstractmethod
    def point(self, index: int) -> Point:
        """
        Точка кривой с индексом `index`.

        Args:
            index: Индекс в [0, length())

        Returns:
            Точка решётки
        """

    @abstractmethod
    def index(self, point: Point) -> int:
        """
        Индекс точки на кривой (обратное к point()).

        Args:
            point: Точка с dimensions() координатами в пределах решётки

        Returns:
            Индекс в [0, length())
        """

    # =========================================================================
    # CONVENIENCE
    # =========================================================================

    def __len__(self) -> int:
        return self.length()

    def points(self, start: int = 0, stop: int | None = None) -> Iterator[Point]:
        """
        Генератор точек кривой на отрезке индексов [start, stop).

        Args:
            start: Первый индекс (default: 0)
            stop: Индекс за последним (default: length(); обрезается по длине)

        Yields:
            Точки в порядке обхода
        """
        end = self.length() if stop is None else min(stop, self.length())
        for i in range(start, end):
            yield self.point(i)

    def _check_index(self, index: int) -> None:
        assert 0 <= index < self.length(), (
            f"{self.name()}: index {index} out of range [0, {self.length()})"
        )

    def _check_point(self, point: Point) -> None:
        assert len(point) == self.dimensions(), (
            f"{self.name()}: expected {self.dimensions()} coordinates, got {len(point)}"
        )
        assert all(c < self.size for c in point), (
            f"{self.name()}: point {point.as_list()} outside grid of size {self.size}"
        )
