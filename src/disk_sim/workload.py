"""Synthetic workloads — random block requests and the process that replays them.

A workload is a flat list of ``BlockRequest`` records, each naming a
file, a block and whether it is a read or a write.  ``Process`` is the
unit of work handed to ``FileSystem.process_request``: when run, it
replays its requests against the file system in order.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from disk_sim.fs.filesystem import FileSystem

DEFAULT_NUM_FILES = 10
DEFAULT_BLOCKS_PER_FILE = 500
DEFAULT_WRITE_RATIO = 0.5


def file_name(number: int) -> str:
    """Return the name used for the *number*-th workload file."""
    return f"file{number}.txt"


def block_data(block: int) -> str:
    """Return the payload a process writes to *block*."""
    return f"Data for block {block}"


@dataclass(frozen=True)
class BlockRequest:
    """One read or write of a single block."""

    file: str
    block: int
    is_write: bool


def create_files(
    fs: FileSystem,
    *,
    num_files: int = DEFAULT_NUM_FILES,
    blocks_per_file: int = DEFAULT_BLOCKS_PER_FILE,
) -> list[str]:
    """Create ``num_files`` workload files and return their names."""
    names = [file_name(i) for i in range(num_files)]
    for name in names:
        fs.create_file(name, blocks_per_file)
    return names


def generate_requests(
    count: int,
    *,
    num_files: int = DEFAULT_NUM_FILES,
    blocks_per_file: int = DEFAULT_BLOCKS_PER_FILE,
    write_ratio: float = DEFAULT_WRITE_RATIO,
    rng: random.Random | None = None,
) -> list[BlockRequest]:
    """Return *count* uniformly random block requests.

    File and block are picked uniformly; each request is a write with
    probability *write_ratio*.  Pass a seeded ``random.Random`` for a
    reproducible workload.
    """
    if not 0.0 <= write_ratio <= 1.0:
        msg = f"write_ratio must be between 0 and 1, got {write_ratio}"
        raise ValueError(msg)
    rng = rng if rng is not None else random.Random()  # noqa: S311
    return [
        BlockRequest(
            file=file_name(rng.randrange(num_files)),
            block=rng.randrange(blocks_per_file),
            is_write=rng.random() < write_ratio,
        )
        for _ in range(count)
    ]


class Process:
    """A unit of work that replays block requests against a file system."""

    def __init__(self, fs: FileSystem, requests: list[BlockRequest]) -> None:
        """Create a process over a list of requests."""
        self._fs = fs
        self._requests = list(requests)
        self._reads = 0
        self._writes = 0

    @property
    def requests(self) -> list[BlockRequest]:
        """Return the requests this process replays."""
        return list(self._requests)

    @property
    def reads(self) -> int:
        """Return how many reads have been performed."""
        return self._reads

    @property
    def writes(self) -> int:
        """Return how many writes have been performed."""
        return self._writes

    def run(self) -> None:
        """Replay every request in order."""
        for request in self._requests:
            if request.is_write:
                self._fs.write_block(request.file, request.block, block_data(request.block))
                self._writes += 1
            else:
                self._fs.read_block(request.file, request.block)
                self._reads += 1
