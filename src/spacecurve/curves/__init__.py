"""
Curve families.

Every family implements the SpaceCurve interface and is built through a
`from_dimensions(dimension, size)` classmethod that validates the grid first.
"""

from spacecurve.curves.base import SpaceCurve
from spacecurve.curves.gray import GrayCurve
from spacecurve.curves.hcurve import HCurve
from spacecurve.curves.hilbert import Hilbert, HilbertImpl
from spacecurve.curves.onion import HairyOnion, Onion
from spacecurve.curves.scan import Scan
from spacecurve.curves.zorder import ZOrder

__all__ = [
    # Interface
    "SpaceCurve",
    # Power-of-two families
    "Hilbert",
    "HilbertImpl",
    "HCurve",
    "ZOrder",
    "GrayCurve",
    # Any-size families
    "Scan",
    "Onion",
    "HairyOnion",
]
