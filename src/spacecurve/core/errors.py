"""
Errors — исключения валидации запросов к кривым

Два вида ошибок достаточно для всех семейств:
- ShapeError: размерность ниже минимума семейства, неизвестное имя кривой
  или иной структурно некорректный запрос
- SizeError: размер стороны не степень двойки там, где это требуется, или
  индекс не помещается в 32 бита

Обе ошибки возникают ДО создания экземпляра кривой: валидация не имеет
побочных эффектов.
"""


class SpaceCurveError(Exception):
    """Базовое исключение пакета spacecurve."""

    pass


class ShapeError(SpaceCurveError):
    """
    Структурно некорректный запрос.

    Примеры: dimension < 2 для Hilbert, dimension >= 32, неизвестный ключ кривой.
    """

    pass


class SizeError(SpaceCurveError):
    """
    Некорректный размер решётки.

    Примеры: size = 3 для power-of-two кривой, order * dimension >= 32.
    """

    pass
