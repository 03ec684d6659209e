"""File system facade — block store, buffer cache and request admission.

The ``FileSystem`` ties the pieces together:

- **Block store** — fixed-length block arrays per file name.
- **Buffer cache** — write-through; reads are answered from the cache
  when the block has been written, from the store otherwise.
- **Admission** — at most ``max_requests`` units of work may be in
  flight.  A unit submitted while every permit is taken is not run; the
  caller gets ``AdmissionResult.REJECTED`` back and a warning is logged.

Store errors (unknown file, bad index, duplicate name) propagate to the
caller unchanged; admission is the only outcome reported as a value.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from disk_sim.fs.blockstore import BlockStore, FileSystemError
from disk_sim.fs.cache import DEFAULT_BUFFER_CACHE_SIZE, BufferCache
from disk_sim.logging import Logger, LogLevel
from disk_sim.sync import Semaphore

if TYPE_CHECKING:
    from disk_sim.disk import DiskScheduler
    from disk_sim.fs.blockstore import Block

DEFAULT_MAX_REQUESTS = 20
"""Units of work allowed in flight at once."""


class Runnable(Protocol):
    """A unit of work submitted for admission."""

    def run(self) -> None:
        """Perform the work."""
        ...


class AdmissionResult(StrEnum):
    """Outcome of ``FileSystem.process_request``."""

    ADMITTED = "admitted"
    REJECTED = "rejected"


class FileSystem:
    """Block-addressed file store with a write-through cache."""

    def __init__(
        self,
        scheduler: DiskScheduler,
        *,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        buffer_cache_size: int = DEFAULT_BUFFER_CACHE_SIZE,
        logger: Logger | None = None,
    ) -> None:
        """Create an empty file system on top of a disk scheduler."""
        self._scheduler = scheduler
        self._store = BlockStore()
        self._cache = BufferCache(capacity=buffer_cache_size)
        self._admission = Semaphore(name="requests", count=max_requests)
        self._logger = logger if logger is not None else Logger()
        self._admitted = 0
        self._rejected = 0

    @property
    def scheduler(self) -> DiskScheduler:
        """Return the disk scheduler this file system sits on."""
        return self._scheduler

    @property
    def store(self) -> BlockStore:
        """Return the underlying block store."""
        return self._store

    @property
    def cache(self) -> BufferCache:
        """Return the buffer cache."""
        return self._cache

    @property
    def logger(self) -> Logger:
        """Return the event log."""
        return self._logger

    @property
    def max_requests(self) -> int:
        """Return the admission limit."""
        return self._admission.max_count

    @property
    def current_requests(self) -> int:
        """Return the number of units currently in flight."""
        return self._admission.in_use

    @property
    def admitted_count(self) -> int:
        """Return how many units have been admitted and run."""
        return self._admitted

    @property
    def rejected_count(self) -> int:
        """Return how many units have been turned away."""
        return self._rejected

    def create_file(self, name: str, num_blocks: int) -> None:
        """Create a file of *num_blocks* empty blocks.

        Raises:
            DuplicateFileError: If *name* already exists.

        """
        try:
            self._store.create(name, num_blocks)
        except FileSystemError as e:
            self._logger.log(LogLevel.ERROR, str(e), source="fs")
            raise
        self._logger.log(LogLevel.INFO, f"Created '{name}' ({num_blocks} blocks)", source="fs")

    def write_block(self, name: str, index: int, data: str) -> None:
        """Write *data* to a block and through to the cache.

        Raises:
            UnknownFileError: If *name* does not exist.
            InvalidBlockIndexError: If *index* is out of range.

        """
        try:
            self._store.write(name, index, data)
        except FileSystemError as e:
            self._logger.log(LogLevel.ERROR, str(e), source="fs")
            raise
        self._cache.put(name, index, data)

    def read_block(self, name: str, index: int) -> Block:
        """Return a block's contents, preferring the cached copy.

        Blocks that were never written read as ``EMPTY_BLOCK``.

        Raises:
            UnknownFileError: If *name* does not exist.
            InvalidBlockIndexError: If *index* is out of range.

        """
        try:
            self._store.check(name, index)
        except FileSystemError as e:
            self._logger.log(LogLevel.ERROR, str(e), source="fs")
            raise
        hit, data = self._cache.lookup(name, index)
        if hit:
            return data
        return self._store.read(name, index)

    def process_request(self, unit: Runnable) -> AdmissionResult:
        """Run *unit* if a request slot is free.

        The slot is held while ``unit.run()`` executes and is given back
        afterwards, even if the unit raises (the exception propagates).

        Returns:
            ``ADMITTED`` if the unit ran, ``REJECTED`` if every slot was
            taken and the unit was dropped without running.

        """
        if not self._admission.try_acquire():
            self._rejected += 1
            self._logger.log(
                LogLevel.WARNING,
                f"Maximum number of requests exceeded ({self.max_requests}); request dropped",
                source="fs",
            )
            return AdmissionResult.REJECTED
        self._admitted += 1
        try:
            unit.run()
        finally:
            self._admission.release()
        return AdmissionResult.ADMITTED

    def __repr__(self) -> str:
        """Return a developer-friendly representation."""
        return (
            f"FileSystem(files={len(self._store)}, cached={len(self._cache)}, "
            f"requests={self.current_requests}/{self.max_requests})"
        )
