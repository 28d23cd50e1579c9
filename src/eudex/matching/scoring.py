# src/eudex/matching/scoring.py
from __future__ import annotations

"""
scoring.py

Does: Orthographic tie-break for phonetic candidates: a rapidfuzz ratio on
      normalized words, and the sort key combining it with the eudex distance.
Returns: normalize_word(), spelling_ratio(), candidate_sort_key().
Used by: matching.index.
"""

import unicodedata

from rapidfuzz import fuzz as rf_fuzz

__all__ = [
    "normalize_word",
    "spelling_ratio",
    "candidate_sort_key",
]

__docformat__ = "google"


def normalize_word(s: str | None) -> str:
    """
    Does: NFC fold, lowercase, trim, collapse inner whitespace.
    """
    if s is None:
        return ""
    s = unicodedata.normalize("NFC", str(s)).lower().strip()
    return " ".join(s.split())


def spelling_ratio(a: str, b: str) -> float:
    """
    Does: Indel similarity of the normalized spellings.
    Returns: Score in [0,100]; 0 when either side is empty.
    """
    a = normalize_word(a)
    b = normalize_word(b)
    if not a or not b:
        return 0.0
    if a == b:
        return 100.0
    return round(rf_fuzz.ratio(a, b), 2)


def candidate_sort_key(word: str, distance: int, ratio: float) -> tuple[int, float, str]:
    """Closest sound first, then closest spelling, then alphabetical."""
    return (distance, -ratio, word)
