"""
log.py.

Does: Opt-in stderr tracing of phonetic candidate lookups. PhoneticIndex.candidates(debug=True)
      emits one line per accepted candidate under the "matching" topic: the query, the
      indexed word and their weighted eudex distance.
Returns: Nothing; lines go to stderr only when EUDEX_DEBUG_TOPICS names the topic (or 'all').
         Unset means silent, so importing the library never prints.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["MATCHING_TOPIC", "debug", "enabled", "reload_topics", "trace_candidate"]

ENV_VAR = "EUDEX_DEBUG_TOPICS"
MATCHING_TOPIC = "matching"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable EUDEX_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enabled(topic: str = "eudex") -> bool:
    """Does: Tell whether `topic` is switched on (unset variable means off)."""
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "eudex",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via EUDEX_DEBUG_TOPICS.
    """
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)


def trace_candidate(query: object, word: str, distance: int) -> None:
    """Does: Trace one query/candidate comparison under the matching topic."""
    debug(f"[CAND] {query!r} ~ {word!r} dist={distance}", topic=MATCHING_TOPIC)
