"""
Core math modules для spacecurve

Битовые примитивы, общие для всех семейств кривых.
"""

# Bit operations
from spacecurve.core.math.bit_ops import (
    WORD_BITS,
    bit_transpose,
    bitmask,
    bitrange,
    graycode,
    igraycode,
    lrot,
    parity,
    rrot,
    setbit,
    tsb,
)

# Morton interleave
from spacecurve.core.math.morton import (
    compact1by1,
    compact1by2,
    deinterleave_lsb,
    interleave_lsb,
    part1by1,
    part1by2,
)

__all__ = [
    # Bit operations: Constants
    "WORD_BITS",
    # Bit operations: Gray code
    "graycode",
    "igraycode",
    "parity",
    # Bit operations: Masks and rotations
    "bitmask",
    "bitrange",
    "lrot",
    "rrot",
    "setbit",
    "tsb",
    # Bit operations: Transpose
    "bit_transpose",
    # Morton
    "compact1by1",
    "compact1by2",
    "deinterleave_lsb",
    "interleave_lsb",
    "part1by1",
    "part1by2",
]
