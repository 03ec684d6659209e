"""Block store — fixed-length block arrays addressed by file name.

Each file is a list of blocks whose length is chosen once, at creation,
and never changes.  Blocks start out empty (``EMPTY_BLOCK``) and hold
whatever string was last written to them.  There is no directory tree
and no deletion: a file lives as long as the store does.
"""

from __future__ import annotations

from typing import TypeAlias

EMPTY_BLOCK = None
"""Marker returned for a block that has never been written."""

Block: TypeAlias = str | None


class FileSystemError(Exception):
    """Raise when a block store operation fails."""


class DuplicateFileError(FileSystemError, FileExistsError):
    """Raise when creating a file whose name is already taken."""


class UnknownFileError(FileSystemError, FileNotFoundError):
    """Raise when operating on a file that does not exist."""


class InvalidBlockIndexError(FileSystemError, IndexError):
    """Raise when a block index falls outside ``[0, length)``."""


class BlockStore:
    """Named, fixed-length arrays of blocks."""

    def __init__(self) -> None:
        """Create an empty store."""
        self._files: dict[str, list[Block]] = {}

    def __contains__(self, name: object) -> bool:
        """Return whether a file with *name* exists."""
        return name in self._files

    def __len__(self) -> int:
        """Return the number of files."""
        return len(self._files)

    def exists(self, name: str) -> bool:
        """Return whether a file with *name* exists."""
        return name in self._files

    def names(self) -> list[str]:
        """Return file names in creation order."""
        return list(self._files)

    def length(self, name: str) -> int:
        """Return the number of blocks in a file."""
        return len(self._blocks(name))

    def create(self, name: str, num_blocks: int) -> None:
        """Allocate a file of *num_blocks* empty blocks.

        Raises:
            DuplicateFileError: If *name* already exists.
            ValueError: If *num_blocks* is negative.

        """
        if name in self._files:
            msg = f"File '{name}' already exists"
            raise DuplicateFileError(msg)
        if num_blocks < 0:
            msg = f"num_blocks must be non-negative, got {num_blocks}"
            raise ValueError(msg)
        self._files[name] = [EMPTY_BLOCK] * num_blocks

    def check(self, name: str, index: int) -> None:
        """Validate that *name* exists and *index* addresses one of its blocks.

        Raises:
            UnknownFileError: If *name* does not exist.
            InvalidBlockIndexError: If *index* is out of range.

        """
        blocks = self._blocks(name)
        if index < 0 or index >= len(blocks):
            msg = f"Invalid block number {index} for file '{name}'"
            raise InvalidBlockIndexError(msg)

    def read(self, name: str, index: int) -> Block:
        """Return the block at *index*, or ``EMPTY_BLOCK`` if never written."""
        self.check(name, index)
        return self._files[name][index]

    def write(self, name: str, index: int, data: str) -> None:
        """Store *data* in the block at *index*."""
        self.check(name, index)
        self._files[name][index] = data

    def _blocks(self, name: str) -> list[Block]:
        """Return the block list for *name*.

        Raises:
            UnknownFileError: If *name* does not exist.

        """
        blocks = self._files.get(name)
        if blocks is None:
            msg = f"File '{name}' does not exist"
            raise UnknownFileError(msg)
        return blocks
