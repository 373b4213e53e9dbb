"""
spacecurve — discrete space-filling curves

Bijective mappings between a linear index and an N-dimensional integer point
for Hilbert, Z-order, Gray code, H-curve, Scan, Onion and Hairy Onion curves.
"""

from spacecurve.core.domain.point import Point
from spacecurve.core.errors import ShapeError, SizeError, SpaceCurveError
from spacecurve.curves.base import SpaceCurve
from spacecurve.registry import CURVE_NAMES, construct, curve_names

__version__ = "0.1.0"


def curve_from_name(name: str, dimension: int, size: int) -> SpaceCurve:
    """
    Построение кривой по ключу реестра.

    Raises:
        ShapeError: неизвестный ключ или недопустимая размерность
        SizeError: недопустимый размер стороны
    """
    return construct(name, dimension, size)


__all__ = [
    "CURVE_NAMES",
    "Point",
    "ShapeError",
    "SizeError",
    "SpaceCurve",
    "SpaceCurveError",
    "curve_from_name",
    "curve_names",
]
