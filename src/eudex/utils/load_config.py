# src/eudex/utils/load_config.py

"""Load a eudex tuning (lane weights + similarity threshold) from a JSON file.

Resolution:
- base directory    -> explicit `base_dir` > $EUDEX_DATA_DIR > current directory
- file name         -> explicit `file` > $EUDEX_TUNING > "tuning" (".json" appended)

Results are cached by (path, mtime, encoding); editing the file invalidates the entry.
Used by callers that tune `similar` for their corpus, and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from types import TracebackType

from eudex.core.tuning import Tuning, TuningValueError

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "load_tuning",
    "clear_tuning_cache",
    "temp_data_dir",
    "TuningFileNotFound",
    "TuningParseError",
    "TuningTypeError",
]

DATA_DIR_ENV = "EUDEX_DATA_DIR"
TUNING_FILE_ENV = "EUDEX_TUNING"
DEFAULT_TUNING_FILE = "tuning"


# ── Exceptions ───────────────────────────────────────────────────────────────
class TuningFileNotFound(FileNotFoundError):
    """Raise when the requested tuning file cannot be read or resolved."""


class TuningParseError(ValueError):
    """Raise when JSON parsing fails for a tuning file."""


class TuningTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_TUNING_CACHE: dict[tuple[Path, float, str], Tuning] = {}


def clear_tuning_cache() -> None:
    """Empty the in-memory tuning cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _TUNING_CACHE.clear()
        log.debug("Tuning cache cleared.")


def _resolve_base_dir(base_dir: Path | None) -> Path:
    """Resolve data dir: explicit > env > cwd."""
    if base_dir is not None:
        return Path(base_dir).resolve()
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(os.path.expanduser(env)).resolve()
    return Path.cwd().resolve()


def load_tuning(
    file: str | os.PathLike[str] | None = None,
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> Tuning:
    """Load <data>/<file>.json into a validated Tuning, with caching."""
    data_dir = _resolve_base_dir(base_dir)

    # Normalize file path and enforce staying under data_dir
    file_str = os.fspath(file) if file is not None else os.environ.get(
        TUNING_FILE_ENV, DEFAULT_TUNING_FILE
    )
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise TuningFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise TuningFileNotFound(f"Tuning file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise TuningFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding)
    with _CACHE_LOCK:
        if cache_key in _TUNING_CACHE:
            log.debug("Tuning cache HIT: %s", path.name)
            return _TUNING_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise TuningParseError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise TuningParseError(f"Cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise TuningFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise TuningTypeError(
            f"{path.name}: expected a JSON object, got {type(data).__name__}"
        )

    # TuningValueError propagates as-is; it already names the broken invariant
    try:
        tuning = Tuning.from_mapping(data)
    except TuningValueError as e:
        log.debug("Rejected tuning %s: %s", path.name, e)
        raise

    with _CACHE_LOCK:
        _TUNING_CACHE[cache_key] = tuning
        log.debug("Tuning cache MISS → STORED: %s (%r)", path.name, tuning)

    return tuning


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily set the data directory via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV)
        os.environ[DATA_DIR_ENV] = self._new
        clear_tuning_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV, None)
        else:
            os.environ[DATA_DIR_ENV] = self._old
        clear_tuning_cache()
