"""
eudex
=====

Does: Root package for the eudex phonetic hash: a 64-bit fingerprint where words
      that sound alike land on numerically close values.
Returns: Word-level API (hash, distance, compare, similar), value types
         (Hash, Difference, Tuning) and the matching helpers.
Used by: All imports starting from `eudex.*`.
"""

from __future__ import annotations

from .api import compare, distance, hash, similar
from .core import (
    DEFAULT_TUNING,
    Difference,
    Hash,
    Tuning,
    TuningValueError,
    encode,
    hamming,
    injective_phone_code,
    phone_code,
    weighted_distance,
    xor,
)
from .matching import Candidate, PhoneticIndex, dedupe
from .utils import (
    TuningFileNotFound,
    TuningParseError,
    TuningTypeError,
    clear_tuning_cache,
    load_tuning,
)

__version__ = "0.2.0"

__all__ = [
    # Words
    "hash",
    "distance",
    "compare",
    "similar",
    # Hashes
    "encode",
    "Hash",
    "Difference",
    "xor",
    "hamming",
    "weighted_distance",
    "phone_code",
    "injective_phone_code",
    # Tuning
    "Tuning",
    "DEFAULT_TUNING",
    "TuningValueError",
    "load_tuning",
    "clear_tuning_cache",
    "TuningFileNotFound",
    "TuningParseError",
    "TuningTypeError",
    # Matching
    "PhoneticIndex",
    "Candidate",
    "dedupe",
]
__docformat__ = "google"
