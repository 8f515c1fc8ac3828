"""
Core value types and numerical primitives.

This module contains the foundational building blocks of the rational
approximator: the exact Rational value type and the int64/float safeguards
it is built on.
"""
