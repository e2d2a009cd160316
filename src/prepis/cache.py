"""Content-addressed validation cache for prepis.

Provides (content_hash, config_hash) -> Parsed caching to avoid
re-validating unchanged segments. A document re-submitted after editing a
few lines only pays for the segments that actually changed.

Thread Safety:
    DictValidationCache is not thread-safe. For parallel validation, use a
    cache implementation with internal locking (e.g. threading.Lock around
    get/put).

Example:
    >>> from prepis import check, compile_config, DictValidationCache
    >>> cache = DictValidationCache()
    >>> config = compile_config(atoms=["a", "b"])
    >>> first = check("ab ba", config, cache=cache)
    >>> check("ab ba", config, cache=cache) is first  # Cache hit
    True
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from prepis.config import ParserConfig
    from prepis.parser import Parsed


class ValidationCache(Protocol):
    """Protocol for content-addressed validation caches.

    Cache key is (content_hash, config_hash). Cached value is Parsed,
    which is immutable and safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> Parsed | None:
        """Return cached result if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, parsed: Parsed) -> None:
        """Store result in cache."""
        ...


class DictValidationCache:
    """In-memory validation cache using a dict.

    Not thread-safe. For parallel validation, wrap with a lock or use a
    thread-safe implementation.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], Parsed] = {}

    def get(self, content_hash: str, config_hash: str) -> Parsed | None:
        """Return cached result if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, parsed: Parsed) -> None:
        """Store result in cache."""
        self._data[(content_hash, config_hash)] = parsed

    def __len__(self) -> int:
        return len(self._data)


def _sha256(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def hash_content(source: str) -> str:
    """Compute SHA256 hash of a raw segment for cache key.

    The raw text is hashed, not the normalized one, so inputs differing
    only in whitespace are cached separately.

    Args:
        source: Raw segment text

    Returns:
        Hex digest of SHA256 hash
    """
    return _sha256(source)


def hash_config(config: ParserConfig) -> str:
    """Compute hash of ParserConfig for cache key.

    Lists are hashed in sorted order, so configs compiled from the same
    entries in a different order share cache entries.

    Args:
        config: ParserConfig to hash

    Returns:
        Hex digest of config hash
    """
    parts = (
        "\x1f".join(sorted(config.whitelist)),
        "\x1f".join(sorted(config.blacklist)),
        "\x1f".join(config.atoms),
        "\x1f".join(sorted(config.after_angle)),
        str(config.whitelist_overrides_blacklist),
    )
    return _sha256("\x1e".join(parts))


__all__ = [
    "DictValidationCache",
    "ValidationCache",
    "hash_config",
    "hash_content",
]
