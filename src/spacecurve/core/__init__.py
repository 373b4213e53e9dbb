"""
Core domain models, bit primitives, errors, and contracts.

This module contains the foundational building blocks shared by every curve
family and independent of any consumer (CLI, GUI, renderer).
"""
