"""Overlap similarity between bigram sets."""
from __future__ import annotations

import math

from strsim.bigram.encoder import BigramSet, Text, encode
from strsim.utils.mathx import safe_div

__all__ = ["NO_SCORE", "is_match", "score", "similarity"]

# NaN compares false against everything, so it fails every threshold.
NO_SCORE = math.nan


def score(xs: BigramSet, ys: BigramSet) -> float:
    """Return ``2 * |xs & ys| / (|xs| + |ys|)``.

    The result lies in ``[0.0, 1.0]``. When both sets are empty the ratio is
    undefined and :data:`NO_SCORE` is returned.
    """

    common = len(xs & ys)
    return safe_div(2 * common, len(xs) + len(ys), default=NO_SCORE)


def is_match(value: float, threshold: float) -> bool:
    """Return ``True`` when ``value`` meets ``threshold``."""

    return value >= threshold


def similarity(x: Text, y: Text) -> float:
    """Score two strings directly."""

    return score(encode(x), encode(y))
