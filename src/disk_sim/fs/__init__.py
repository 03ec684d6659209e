"""File system subsystem — block store, buffer cache, and request admission.

Re-exports public symbols so callers can write::

    from disk_sim.fs import FileSystem, AdmissionResult
"""

from disk_sim.fs.blockstore import (
    EMPTY_BLOCK,
    BlockStore,
    DuplicateFileError,
    FileSystemError,
    InvalidBlockIndexError,
    UnknownFileError,
)
from disk_sim.fs.cache import DEFAULT_BUFFER_CACHE_SIZE, BufferCache
from disk_sim.fs.filesystem import DEFAULT_MAX_REQUESTS, AdmissionResult, FileSystem, Runnable

__all__ = [
    "DEFAULT_BUFFER_CACHE_SIZE",
    "DEFAULT_MAX_REQUESTS",
    "EMPTY_BLOCK",
    "AdmissionResult",
    "BlockStore",
    "BufferCache",
    "DuplicateFileError",
    "FileSystem",
    "FileSystemError",
    "InvalidBlockIndexError",
    "Runnable",
    "UnknownFileError",
]
