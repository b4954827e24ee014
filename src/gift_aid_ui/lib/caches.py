"""
Disk-backed TTL cache for slow lookups such as filter picker options.

diskcache stores entries in SQLite under the cache directory, so every
worker process of the app shares the same entries.
"""

from pathlib import Path
from typing import Any, Callable, Hashable, TypeVar

import diskcache

from gift_aid_ui.lib import logs

LOG = logs.logger(__file__)

T = TypeVar("T")

_MISSING = object()


class DiskCache:
    """
    Named on-disk cache.

    Attributes:
        cache_dir: Directory holding the cache database.
        default_expire: TTL in seconds applied when get_or_load is called
            without one; None keeps entries until deleted.
    """

    def __init__(self, cache_dir: str | Path, default_expire: int | None = None) -> None:
        self.cache_dir = Path(cache_dir)
        self.default_expire = default_expire
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get_or_load(
        self,
        key: Hashable,
        loader: Callable[[], T],
        expire: int | None = None,
    ) -> T:
        """
        Return the entry for key, calling loader and storing its result on a miss.

        Falsy results (an empty option list) are cached like any other.
        """
        value = self._cache.get(key, default=_MISSING)
        if value is not _MISSING:
            LOG.debug("Cache hit - dir:%s key:%s", self.cache_dir.name, key)
            return value
        LOG.debug("Cache miss - dir:%s key:%s", self.cache_dir.name, key)
        value = loader()
        self._cache.set(key, value, expire=expire if expire is not None else self.default_expire)
        return value

    def delete(self, key: Hashable) -> bool:
        """Drop one entry; returns False if it was not cached."""
        return self._cache.delete(key)

    def clear(self) -> int:
        """Drop every entry; returns the number removed."""
        return self._cache.clear()

    def close(self) -> None:
        self._cache.close()

    def __contains__(self, key: Any) -> bool:
        return key in self._cache
