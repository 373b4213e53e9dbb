"""
Domain models and value objects.

Contains the Point value type and GridSpec grid validation.
"""

from spacecurve.core.domain.grid_spec import (
    DEFAULT_MIN_DIMENSION,
    INDEX_BITS,
    MAX_DIMENSION,
    MAX_LENGTH,
    GridLimits,
    GridSpec,
)
from spacecurve.core.domain.point import Point

__all__ = [
    # Point
    "Point",
    # GridSpec
    "GridSpec",
    "GridLimits",
    "DEFAULT_MIN_DIMENSION",
    "INDEX_BITS",
    "MAX_DIMENSION",
    "MAX_LENGTH",
]
