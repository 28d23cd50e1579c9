# src/eudex/core/encoder.py
from __future__ import annotations

"""
encoder.py

Does: Fold a word into a 64-bit locality-sensitive phonetic hash. The head letter's
      injective code fills the top lane; up to seven distinguishing phone codes of
      the following letters fill lanes 6..0, most recent in lane 0.
Returns: encode() (int) and the Hash value type.
Used by: The distance metric, the public facade and the matching index.
"""

import unicodedata

from eudex.types import TextInput

from .constants import FEATURE_MASK, HEAD_SHIFT, LANE_BITS, MAX_TAIL_LANES, U64_MASK
from .distance import Difference
from .phones import injective_code_point, plain_code_point

__all__ = [
    "as_text",
    "encode",
    "Hash",
]

__docformat__ = "google"


# ─────────────────────────────────────────────────────────────────────────────
# Input coercion
# ─────────────────────────────────────────────────────────────────────────────

def as_text(text: TextInput) -> str:
    """
    Does: Coerce supported inputs to an NFC-composed str.
          bytes-like values decode as UTF-8, falling back to Latin-1;
          None becomes "".
    Returns: str.
    """
    if text is None:
        return ""
    if isinstance(text, (bytes, bytearray, memoryview)):
        raw = bytes(text)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            text = raw.decode("latin-1")
    elif not isinstance(text, str):
        raise TypeError(f"cannot hash {type(text).__name__!r}, expected str or bytes")
    # composed form, so "e" + U+0301 maps like "é"
    return unicodedata.normalize("NFC", text)


# ─────────────────────────────────────────────────────────────────────────────
# Encoding
# ─────────────────────────────────────────────────────────────────────────────

def encode(text: TextInput) -> int:
    """
    Does: Compute the eudex hash of one word.

    The tail is built by a small state machine: the accumulator, the number of
    lanes written, and the last recorded phone code (seeded with the head
    letter's plain code). A letter is recorded only when its feature bits differ
    from the last recorded code, which collapses doubled letters, vowel runs and
    same-class consonants. Characters outside the phone tables are skipped.
    Letters past the seventh recorded one are dropped.

    Returns: Unsigned 64-bit int; 0 for empty input.
    """
    s = as_text(text)
    if not s:
        return 0

    chars = iter(s)
    head = ord(next(chars))
    first = injective_code_point(head) or 0
    prev = plain_code_point(head) or 0

    acc = 0
    lanes = 0
    for ch in chars:
        if lanes == MAX_TAIL_LANES:
            break
        code = plain_code_point(ord(ch))
        if code is None:
            continue
        if code & FEATURE_MASK == prev & FEATURE_MASK:
            continue
        acc = (acc << LANE_BITS) | code
        prev = code
        lanes += 1

    return (acc | (first << HEAD_SHIFT)) & U64_MASK


# ─────────────────────────────────────────────────────────────────────────────
# Value type
# ─────────────────────────────────────────────────────────────────────────────

class Hash:
    """
    Immutable eudex hash. Subtracting two hashes yields their Difference.

    Example:
        >>> d = Hash.from_text("jumpo") - Hash.from_text("jumbo")
        >>> d.similar()
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if not 0 <= value <= U64_MASK:
            raise ValueError(f"hash out of 64-bit range: {value!r}")
        self._value = value

    @classmethod
    def from_text(cls, text: TextInput) -> Hash:
        return cls(encode(text))

    @property
    def value(self) -> int:
        return self._value

    def lanes(self) -> tuple[int, ...]:
        """Byte lanes, most significant (head letter) first."""
        return tuple(self._value.to_bytes(8, "big"))

    def __sub__(self, other: object) -> Difference:
        if not isinstance(other, Hash):
            return NotImplemented
        return Difference(self._value ^ other._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Hash):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Hash(0x{self._value:016x})"
