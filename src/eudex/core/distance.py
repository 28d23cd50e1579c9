# src/eudex/core/distance.py
from __future__ import annotations

"""
distance.py

Does: Distances between two eudex hashes, all projected from their XOR:
      flat Hamming weight, lane-weighted (graduated) distance, similarity test.
Returns: xor(), hamming(), lane_popcounts(), weighted_distance(), similar(), Difference.
Used by: Hash subtraction (core.encoder), the public facade, matching.
"""

from typing import Optional

from .constants import LANE_BITS, LANE_COUNT, LANE_MASK, U64_MASK
from .tuning import DEFAULT_TUNING, Tuning

__all__ = [
    "xor",
    "hamming",
    "lane_popcounts",
    "weighted_distance",
    "similar",
    "Difference",
]

__docformat__ = "google"


# ─────────────────────────────────────────────────────────────────────────────
# 1) Raw projections
# ─────────────────────────────────────────────────────────────────────────────

def xor(h1: int, h2: int) -> int:
    """Bitwise difference of two hashes."""
    return (h1 ^ h2) & U64_MASK


def hamming(h1: int, h2: int) -> int:
    """Number of differing bits; every lane weighs the same."""
    return xor(h1, h2).bit_count()


def lane_popcounts(diff: int) -> tuple[int, ...]:
    """Set bits per lane of a XOR value, lane 0 (least significant) first."""
    return tuple(
        ((diff >> (LANE_BITS * lane)) & LANE_MASK).bit_count()
        for lane in range(LANE_COUNT)
    )


def _weighted(diff: int, tuning: Tuning) -> int:
    return sum(n * w for n, w in zip(lane_popcounts(diff), tuning.weights))


def weighted_distance(h1: int, h2: int, tuning: Optional[Tuning] = None) -> int:
    """
    Does: Sum each lane's popcount times its weight. Weights strictly increase
          towards lane 7, so a head-letter mismatch outweighs any tail mismatch
          of the same size.
    Returns: Non-negative int.
    """
    return _weighted(xor(h1, h2), tuning or DEFAULT_TUNING)


def similar(h1: int, h2: int, tuning: Optional[Tuning] = None) -> bool:
    """True when the weighted distance is below the tuning threshold."""
    tuning = tuning or DEFAULT_TUNING
    return _weighted(xor(h1, h2), tuning) < tuning.threshold


# ─────────────────────────────────────────────────────────────────────────────
# 2) Result type
# ─────────────────────────────────────────────────────────────────────────────

class Difference:
    """
    XOR of two hashes, queried for several distance flavours without
    re-hashing the words.
    """

    __slots__ = ("_xor",)

    def __init__(self, diff: int) -> None:
        self._xor = diff & U64_MASK

    @property
    def xor(self) -> int:
        return self._xor

    def hamming(self) -> int:
        return self._xor.bit_count()

    def lanes(self) -> tuple[int, ...]:
        return lane_popcounts(self._xor)

    def weighted_distance(self, tuning: Optional[Tuning] = None) -> int:
        return _weighted(self._xor, tuning or DEFAULT_TUNING)

    def similar(self, tuning: Optional[Tuning] = None) -> bool:
        tuning = tuning or DEFAULT_TUNING
        return _weighted(self._xor, tuning) < tuning.threshold

    def __int__(self) -> int:
        return self._xor

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Difference):
            return self._xor == other._xor
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._xor)

    def __repr__(self) -> str:
        return f"Difference(0x{self._xor:016x})"
