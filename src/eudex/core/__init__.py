# src/eudex/core/__init__.py
"""
core.

Does: Facade over the phone tables, the encoder and the distance metric.
Returns: Public API for hashing a word and comparing two hashes.
Used by: eudex.api, eudex.matching, tests.
"""

from __future__ import annotations

# ── Phone tables ─────────────────────────────────────────────────────────────
from .phones import (
    injective_phone_code,
    is_phonetic,
    phone_code,
)

# ── Encoder ──────────────────────────────────────────────────────────────────
from .encoder import (
    Hash,
    as_text,
    encode,
)

# ── Distance ─────────────────────────────────────────────────────────────────
from .distance import (
    Difference,
    hamming,
    lane_popcounts,
    similar,
    weighted_distance,
    xor,
)
from .tuning import DEFAULT_TUNING, Tuning, TuningValueError

__all__ = [
    # Phones
    "phone_code",
    "injective_phone_code",
    "is_phonetic",
    # Encoder
    "encode",
    "as_text",
    "Hash",
    # Distance
    "xor",
    "hamming",
    "lane_popcounts",
    "weighted_distance",
    "similar",
    "Difference",
    # Tuning
    "Tuning",
    "TuningValueError",
    "DEFAULT_TUNING",
]

__docformat__ = "google"
