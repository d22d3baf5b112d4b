"""Cache helpers for loaded tables of contents."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Dict, Tuple

from doctoc.toc import TableOfContents, load_toc

logger = logging.getLogger(__name__)

# Entries are keyed by path and strictness and hold the load time, the file
# modification time and the tree.
CacheEntry = Tuple[float, float, TableOfContents]
CacheKey = Tuple[Path, bool]
CacheStore = Dict[CacheKey, CacheEntry]

# Global in-memory cache and its default time-to-live in seconds.
_CACHE: CacheStore = {}
_TTL_SECONDS = 15 * 60


def _ttl_seconds() -> float:
    """Return the cache lifetime, honoring ``DOCTOC_CACHE_TTL``."""

    value = os.environ.get("DOCTOC_CACHE_TTL")
    if not value:
        return _TTL_SECONDS
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid DOCTOC_CACHE_TTL value {value!r}")
        return _TTL_SECONDS


def load_cached_toc(path: Path, strict: bool = False) -> TableOfContents:
    """Return the table of contents for ``path`` using a timed cache.

    Args:
        path: Location of the JSON or YAML file.
        strict: Reject unknown node fields when the file is (re)loaded.

    Returns:
        Parsed table of contents. A cached tree is reused while it is
        younger than the TTL and the file has not been modified.
    """

    path = Path(path)
    now = time.time()
    mtime = path.stat().st_mtime
    key = (path, strict)
    cached = _CACHE.get(key)

    # Return cached entry when still valid.
    if cached and now - cached[0] < _ttl_seconds() and cached[1] == mtime:
        logger.debug(f"Using cached table of contents for {path}")
        return cached[2]

    toc = load_toc(path, strict=strict)

    # Store fresh entry in the cache.
    _CACHE[key] = (now, mtime, toc)
    return toc


def clear_cache() -> None:
    """Forget every cached table of contents."""
    _CACHE.clear()
