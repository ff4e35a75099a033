"""Cached loading of component files."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml  # type: ignore[import-untyped]

from chatfmt.components import BaseComponent, component_from_map
from chatfmt.json_utils import json_loads

logger = logging.getLogger(__name__)

# Types for cache storage.
CacheEntry = Tuple[float, Any]
CacheStore = Dict[Path, CacheEntry]

# Global in-memory cache of decoded files and its time-to-live in seconds.
_CACHE: CacheStore = {}
_TTL_SECONDS = 15 * 60

# File extensions understood by the loader.
YAML_SUFFIXES = (".yaml", ".yml")
SUFFIXES = (".json",) + YAML_SUFFIXES


def load_component(path: Path) -> BaseComponent:
    """Return the component stored in ``path`` using a timed cache.

    The decoded file content is cached; every call builds a fresh tree so
    callers may mutate the result freely.

    Args:
        path: Location of the JSON or YAML file holding a component map.

    Returns:
        The component tree described by the file.

    Throws:
        ValueError: If the file type is unsupported or the content does not
            describe a component.
    """
    now = time.time()
    cached = _CACHE.get(path)

    # Reuse the decoded content when still valid.
    if cached and now - cached[0] < _TTL_SECONDS:
        logger.debug("Component cache hit for %s", path)
        data = cached[1]
    else:
        data = _load_component_file(path)
        _CACHE[path] = (now, data)

    return component_from_map(data)


def clear_cache() -> None:
    """Forget every cached file."""

    _CACHE.clear()


def _load_component_file(path: Path) -> Any:  # noqa: ANN401
    """Read and decode the structured file at ``path``.

    Args:
        path: Location of the JSON or YAML component file.

    Returns:
        Decoded file content.
    """

    if path.suffix not in SUFFIXES:
        raise ValueError(f"Unsupported component file type: {path.suffix}")

    text = path.read_text(encoding="utf-8")
    logger.debug("Read %d characters from %s", len(text), path)

    # Decode JSON or YAML depending on file extension.
    if path.suffix == ".json":
        return json_loads(text)
    return yaml.safe_load(text)
