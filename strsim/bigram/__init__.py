"""Bigram encoding and similarity scoring."""

from .encoder import BYTE_BASE, CODEPOINT_BASE, BigramSet, encode, pair
from .similarity import NO_SCORE, is_match, score, similarity

__all__ = [
    "BYTE_BASE",
    "CODEPOINT_BASE",
    "BigramSet",
    "NO_SCORE",
    "encode",
    "is_match",
    "pair",
    "score",
    "similarity",
]
