# src/eudex/core/tuning.py
from __future__ import annotations

"""
tuning.py

Does: Hold the lane weights and similarity threshold used by the distance metric,
      validated so that lane weights strictly increase towards the head letter.
Returns: Tuning, DEFAULT_TUNING, TuningValueError.
Used by: core.distance, utils.load_config, matching.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .constants import DEFAULT_THRESHOLD, DEFAULT_WEIGHTS, LANE_COUNT

__all__ = [
    "Tuning",
    "TuningValueError",
    "DEFAULT_TUNING",
]

__docformat__ = "google"


class TuningValueError(ValueError):
    """Raise when weights or threshold break the tuning invariants."""


def _as_int(value: Any, what: str) -> int:
    # bool is an int subclass but never a meaningful weight
    if isinstance(value, bool) or not isinstance(value, int):
        raise TuningValueError(f"{what} must be an integer, got {value!r}")
    return value


class Tuning:
    """
    Lane weights (lane 0 first) and the `similar` threshold.

    Invariants:
        - exactly eight positive integer weights, strictly increasing;
        - a positive integer threshold.
    """

    __slots__ = ("_weights", "_threshold")

    def __init__(
        self,
        weights: Iterable[int] = DEFAULT_WEIGHTS,
        threshold: int = DEFAULT_THRESHOLD,
    ) -> None:
        ws = tuple(_as_int(w, f"weight[{i}]") for i, w in enumerate(weights))
        if len(ws) != LANE_COUNT:
            raise TuningValueError(f"expected {LANE_COUNT} lane weights, got {len(ws)}")
        if ws[0] <= 0:
            raise TuningValueError(f"lane weights must be positive, got {ws}")
        if any(lo >= hi for lo, hi in zip(ws, ws[1:])):
            raise TuningValueError(f"lane weights must strictly increase, got {ws}")

        t = _as_int(threshold, "threshold")
        if t <= 0:
            raise TuningValueError(f"threshold must be positive, got {t}")

        self._weights = ws
        self._threshold = t

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, base: Tuning | None = None) -> Tuning:
        """
        Does: Build a Tuning from {"weights": [...], "threshold": n}; missing keys
              inherit from `base` (DEFAULT_TUNING when omitted).
        Returns: Tuning.
        """
        base = base or DEFAULT_TUNING
        unknown = set(data) - {"weights", "threshold"}
        if unknown:
            raise TuningValueError(f"unknown tuning keys: {sorted(unknown)}")
        weights = data.get("weights", base.weights)
        if isinstance(weights, (str, bytes)) or not isinstance(weights, Iterable):
            raise TuningValueError(f"weights must be a list of integers, got {weights!r}")
        return cls(weights, data.get("threshold", base.threshold))

    @property
    def weights(self) -> tuple[int, ...]:
        return self._weights

    @property
    def threshold(self) -> int:
        return self._threshold

    def as_dict(self) -> dict[str, Any]:
        return {"weights": list(self._weights), "threshold": self._threshold}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuning):
            return NotImplemented
        return self._weights == other._weights and self._threshold == other._threshold

    def __hash__(self) -> int:
        return hash((self._weights, self._threshold))

    def __repr__(self) -> str:
        return f"Tuning(weights={self._weights}, threshold={self._threshold})"


DEFAULT_TUNING = Tuning()
