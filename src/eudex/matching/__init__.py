# src/eudex/matching/__init__.py
"""
matching.

Does: Facade exposing phonetic candidate lookup and fuzzy dedup built on eudex hashes.
Returns: PhoneticIndex, Candidate, dedupe, spelling_ratio.
Used by: Spell-correction and record-linkage callers.
"""

from __future__ import annotations

from .index import (
    Candidate,
    PhoneticIndex,
    dedupe,
)
from .scoring import spelling_ratio

__all__ = [
    "Candidate",
    "PhoneticIndex",
    "dedupe",
    "spelling_ratio",
]

__docformat__ = "google"
