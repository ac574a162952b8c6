"""Mathematical helper utilities for strsim."""
from __future__ import annotations

__all__ = ["safe_div"]


def safe_div(numerator: float | int, denominator: float | int, default: float = 0.0) -> float:
    """Divide ``numerator`` by ``denominator``.

    Returns ``default`` whenever the denominator is zero instead of raising.
    """

    if denominator == 0:
        return float(default)
    return float(numerator) / float(denominator)
