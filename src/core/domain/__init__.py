"""
Domain value objects.

Contains the immutable Rational value type and its search sentinels.
"""

from src.core.domain.rational import INFINITY, ZERO, Rational

__all__ = [
    "Rational",
    "ZERO",
    "INFINITY",
]
