"""Buffer cache — a write-through copy of recently written blocks.

Every block write lands in the cache as well as in the block store, and
reads consult the cache first.  The cache is created with a capacity,
but nothing is ever evicted: the capacity is recorded and reported, not
enforced, so the cache grows with every distinct block written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from disk_sim.fs.blockstore import Block

DEFAULT_BUFFER_CACHE_SIZE = 250
"""Configured (but unenforced) cache capacity, in blocks."""

CacheKey: TypeAlias = tuple[str, int]


class BufferCache:
    """Block contents keyed by ``(filename, block index)``.

    Also counts hits and misses seen by ``get`` so that a run can report
    how often reads were served from the cache.
    """

    def __init__(self, *, capacity: int = DEFAULT_BUFFER_CACHE_SIZE) -> None:
        """Create an empty cache with a nominal capacity."""
        if capacity < 0:
            msg = f"capacity must be non-negative, got {capacity}"
            raise ValueError(msg)
        self._capacity = capacity
        self._entries: dict[CacheKey, Block] = {}
        self._hits = 0
        self._misses = 0

    @property
    def capacity(self) -> int:
        """Return the configured capacity."""
        return self._capacity

    @property
    def hits(self) -> int:
        """Return how many lookups found an entry."""
        return self._hits

    @property
    def misses(self) -> int:
        """Return how many lookups found nothing."""
        return self._misses

    def __len__(self) -> int:
        """Return the number of cached blocks."""
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        """Return whether *key* is cached (does not count as a lookup)."""
        return key in self._entries

    def put(self, name: str, index: int, data: Block) -> None:
        """Cache *data* for a block, replacing any previous value."""
        self._entries[(name, index)] = data

    def lookup(self, name: str, index: int) -> tuple[bool, Block]:
        """Look a block up and record the hit or miss.

        Returns:
            ``(True, data)`` on a hit, ``(False, None)`` on a miss.  The
            flag keeps a cached empty string apart from a miss.

        """
        key = (name, index)
        if key in self._entries:
            self._hits += 1
            return True, self._entries[key]
        self._misses += 1
        return False, None

    def get(self, name: str, index: int) -> Block:
        """Return the cached value for a block, or None on a miss."""
        return self.lookup(name, index)[1]

    def __repr__(self) -> str:
        """Return a developer-friendly representation."""
        return f"BufferCache(size={len(self._entries)}, capacity={self._capacity})"
