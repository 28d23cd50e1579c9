# src/eudex/api.py
from __future__ import annotations

"""
api.py

Does: Word-level entry points: hash a word, diff two words, test similarity.
Returns: hash(), distance(), compare(), similar().
Used by: Package root (`import eudex`), callers that work with plain strings.
"""

from typing import Optional

from eudex.core import Difference, Tuning, encode
from eudex.types import TextInput

__all__ = [
    "hash",
    "distance",
    "compare",
    "similar",
]

__docformat__ = "google"


def hash(text: TextInput) -> int:  # noqa: A001 - public name of the operation
    """
    Does: Phonetic hash of one word; case and punctuation have no effect.
    Returns: Unsigned 64-bit int (0 for empty input).
    """
    return encode(text)


def distance(a: TextInput, b: TextInput) -> int:
    """XOR of the two hashes; low Hamming weight means the words sound alike."""
    return encode(a) ^ encode(b)


def compare(a: TextInput, b: TextInput) -> Difference:
    """
    Does: Hash both words once and keep their XOR.
    Returns: Difference exposing xor, hamming(), weighted_distance(), similar().
    """
    return Difference(distance(a, b))


def similar(a: TextInput, b: TextInput, *, tuning: Optional[Tuning] = None) -> bool:
    """True when the words' weighted distance is below the tuning threshold."""
    return compare(a, b).similar(tuning)
