# eudex/utils/__init__.py
"""

Does: Provide tuning-file loading and lightweight debug logging utilities.
Returns: Public API via load_tuning/clear_tuning_cache and debug/reload_topics.
Used by: The public facade, the matching index, tests.
"""

from __future__ import annotations

from .load_config import (
    TuningFileNotFound,
    TuningParseError,
    TuningTypeError,
    clear_tuning_cache,
    load_tuning,
    temp_data_dir,
)
from .log import (
    MATCHING_TOPIC,
    debug,
    enabled,
    reload_topics,
    trace_candidate,
)

__all__ = [
    # Tuning loading
    "load_tuning",
    "clear_tuning_cache",
    "temp_data_dir",
    "TuningFileNotFound",
    "TuningParseError",
    "TuningTypeError",
    # Logging helpers
    "MATCHING_TOPIC",
    "debug",
    "enabled",
    "reload_topics",
    "trace_candidate",
]
