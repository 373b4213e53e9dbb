"""
Test suite for spacecurve

Contains:
- tests/unit/          : Unit tests for bit primitives, domain models,
                         curve families, registry and JSON contracts
"""
