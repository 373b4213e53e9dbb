"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе движка кривых.
"""

from .validators import (
    ContractValidator,
    CurveCatalogValidator,
    CurveRequestValidator,
    SchemaLoader,
    validate_curve_catalog,
    validate_curve_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CurveRequestValidator",
    "CurveCatalogValidator",
    # Functions
    "validate_curve_request",
    "validate_curve_catalog",
]
