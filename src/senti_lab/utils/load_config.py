# src/senti_lab/utils/load_config.py

"""Load the JSON data files (lexicon, example templates) with caching and typed coercions.

Modes:
- "raw"             -> parsed JSON as-is
- "set"             -> frozenset[str] built from a JSON list of scalars
- "validated_dict"  -> dict[str, Any] passed through an optional validator

The data directory is resolved as: explicit base_dir > SENTI_LAB_DATA_DIR
> first "data" directory found walking up from this package.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "set", "validated_dict"]
Validator = Callable[[dict[str, Any]], Any]

__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_VAR = "SENTI_LAB_DATA_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing or validation fails for a data file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: path, mtime, mode, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (pytest / hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Return the data directory to read from (see module docstring for the order)."""
    if base_dir is not None:
        return Path(base_dir).resolve()
    value = os.environ.get(ENV_VAR)
    if value:
        return Path(os.path.expanduser(value)).resolve()
    candidates = _candidate_data_dirs()
    for cand in candidates:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in candidates)
    )


def _resolve_file(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    name = os.fspath(file)
    if not name.endswith(".json"):
        name = f"{name}.json"
    path = (data_dir / name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_json(path: Path, encoding: str) -> Any:
    try:
        with path.open("r", encoding=encoding) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def _as_set(data: Any, name: str) -> frozenset[str]:
    if not isinstance(data, list):
        raise ConfigTypeError(f"{name}: expected list for mode 'set', got {type(data).__name__}")
    bad = [x for x in data if not isinstance(x, (str, int, float, bool))]
    if bad:
        preview = ", ".join(type(x).__name__ for x in bad[:3])
        raise ConfigTypeError(
            f"{name}: list must contain only scalars for 'set' (first bad types: {preview})"
        )
    return frozenset(map(str, data))


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> Any:
    """Load <data>/<file>.json, coerce it by mode and cache it.

    Results produced through a validator are never cached, since the validator
    may build a different object on each call.
    """
    data_dir = resolve_data_dir(base_dir)
    path = _resolve_file(data_dir, file)

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e
    cache_key = (path, mtime, mode, encoding)

    if validator is None:
        with _CACHE_LOCK:
            if cache_key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[cache_key]

    data = _read_json(path, encoding)

    if mode == "raw":
        result: Any = data
    elif mode == "set":
        result = _as_set(data, path.name)
    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except (ValueError, TypeError, KeyError) as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        result = data
    else:
        raise ValueError(f"Unknown mode '{mode}'")

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
        log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s", path.name)
    return result


class temp_data_dir:
    """Temporarily point SENTI_LAB_DATA_DIR at another directory for the block."""

    _VAR = ENV_VAR

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(self._VAR)
        os.environ[self._VAR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(self._VAR, None)
        else:
            os.environ[self._VAR] = self._old
        clear_config_cache()
