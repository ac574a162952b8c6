"""Bigram encoding of strings into integer sets."""
from __future__ import annotations

import sys
from typing import AbstractSet, Union

Text = Union[bytes, str]
BigramSet = AbstractSet[int]

__all__ = ["BYTE_BASE", "CODEPOINT_BASE", "BigramSet", "encode", "pair"]

BYTE_BASE = 256
CODEPOINT_BASE = sys.maxunicode + 1


def pair(a: int, b: int, base: int = BYTE_BASE) -> int:
    """Return the integer id of the adjacent pair ``(a, b)``.

    Only used for counting, so there is no inverse. Injective as long as both
    codes are below ``base``.
    """

    return base * a + b


def encode(text: Text) -> BigramSet:
    """Return the set of adjacent-character pairs of ``text``.

    ``bytes`` are paired on raw byte values. ``str`` is paired on codepoints.
    Inputs shorter than two units give an empty set.
    """

    if isinstance(text, str):
        codes = [ord(char) for char in text]
        base = CODEPOINT_BASE
    else:
        codes = list(text)
        base = BYTE_BASE
    return frozenset(pair(a, b, base) for a, b in zip(codes, codes[1:]))
