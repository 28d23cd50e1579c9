# src/eudex/matching/index.py
from __future__ import annotations

"""
index.py

Does: Pre-hash a vocabulary once and query it for phonetically close words
      (spell-correction candidates), plus greedy grouping of sound-alike words
      (fuzzy dedup).
Returns: PhoneticIndex, Candidate, dedupe().
Used by: Callers doing candidate generation or record linkage on word lists.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import NamedTuple, Optional, Union

from eudex.core import DEFAULT_TUNING, Tuning, encode, similar, weighted_distance
from eudex.types import TokenLike
from eudex.utils.log import trace_candidate

from .scoring import candidate_sort_key, spelling_ratio

__all__ = [
    "Candidate",
    "PhoneticIndex",
    "dedupe",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

WordLike = Union[str, TokenLike, None]


class Candidate(NamedTuple):
    word: str
    distance: int
    ratio: float


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _word_of(item: WordLike) -> str:
    """
    Does: Accept plain strings or token objects exposing `.text`.
    Returns: Stripped word, "" for None / blanks / unsupported objects.
    """
    if item is None:
        return ""
    if isinstance(item, str):
        return item.strip()
    text = getattr(item, "text", None)
    if isinstance(text, str):
        return text.strip()
    log.debug("[SKIP non-str] %r", item)
    return ""


# ─────────────────────────────────────────────────────────────────────────────
# 1) Index
# ─────────────────────────────────────────────────────────────────────────────

class PhoneticIndex:
    """
    Vocabulary with precomputed eudex hashes.

    Example:
        >>> idx = PhoneticIndex(["meyer", "miller", "smith"])
        >>> idx.best("maier")
        'meyer'
    """

    def __init__(self, words: Iterable[WordLike] = (), *, tuning: Optional[Tuning] = None):
        self._tuning = tuning or DEFAULT_TUNING
        self._hashes: dict[str, int] = {}
        self.extend(words)

    @property
    def tuning(self) -> Tuning:
        return self._tuning

    def add(self, word: WordLike) -> bool:
        """Does: Index one word. Returns: False when blank or already present."""
        w = _word_of(word)
        if not w or w in self._hashes:
            return False
        self._hashes[w] = encode(w)
        return True

    def extend(self, words: Iterable[WordLike]) -> int:
        """Does: Index many words. Returns: How many were new."""
        added = sum(1 for w in words if self.add(w))
        log.debug("Indexed %d new words (total=%d)", added, len(self._hashes))
        return added

    def hash_of(self, word: WordLike) -> Optional[int]:
        return self._hashes.get(_word_of(word))

    def candidates(
        self,
        word: WordLike,
        *,
        max_distance: Optional[int] = None,
        limit: Optional[int] = None,
        debug: bool = False,
    ) -> list[Candidate]:
        """
        Does: Collect indexed words whose weighted distance to `word` is below
              `max_distance` (tuning threshold by default), nearest first; ties
              broken by spelling ratio, then alphabetically.
        Returns: List of Candidate, at most `limit` long.
        """
        raw = _word_of(word)
        if not raw:
            return []
        if limit is not None and limit <= 0:
            return []

        bound = self._tuning.threshold if max_distance is None else max_distance
        query = encode(raw)

        found: list[Candidate] = []
        for cand, h in self._hashes.items():
            d = weighted_distance(query, h, self._tuning)
            if d >= bound:
                continue
            found.append(Candidate(cand, d, spelling_ratio(raw, cand)))
            if debug:
                trace_candidate(raw, cand, d)

        found.sort(key=lambda c: candidate_sort_key(c.word, c.distance, c.ratio))
        return found if limit is None else found[:limit]

    def best(self, word: WordLike, *, debug: bool = False) -> Optional[str]:
        """Does: Closest indexed word. Returns: Word or None if nothing is similar."""
        hits = self.candidates(word, limit=1, debug=debug)
        return hits[0].word if hits else None

    def __len__(self) -> int:
        return len(self._hashes)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip() in self._hashes

    def __iter__(self) -> Iterator[str]:
        return iter(self._hashes)


# ─────────────────────────────────────────────────────────────────────────────
# 2) Fuzzy dedup
# ─────────────────────────────────────────────────────────────────────────────

def dedupe(words: Iterable[WordLike], *, tuning: Optional[Tuning] = None) -> list[list[str]]:
    """
    Does: Greedy grouping in input order; a word joins the first group whose
          representative (first member) sounds similar, else opens a new group.
    Returns: Groups of words, blanks dropped.
    """
    tuning = tuning or DEFAULT_TUNING
    groups: list[list[str]] = []
    heads: list[int] = []

    for item in words:
        w = _word_of(item)
        if not w:
            continue
        h = encode(w)
        for i, head in enumerate(heads):
            if similar(h, head, tuning):
                groups[i].append(w)
                break
        else:
            heads.append(h)
            groups.append([w])

    log.debug("Deduped into %d groups", len(groups))
    return groups
