"""Tests for the file system facade.

The file system combines the block store, the write-through buffer
cache, and a bounded admission counter for units of work.
"""

import pytest

from disk_sim.disk import DiskScheduler
from disk_sim.fs import (
    EMPTY_BLOCK,
    AdmissionResult,
    DuplicateFileError,
    FileSystem,
    InvalidBlockIndexError,
    UnknownFileError,
)
from disk_sim.logging import Logger, LogLevel

NUM_BLOCKS = 4


def _fs(*, max_requests: int = 20) -> FileSystem:
    """Create a file system with one four-block file named ``f``."""
    fs = FileSystem(DiskScheduler(), max_requests=max_requests)
    fs.create_file("f", NUM_BLOCKS)
    return fs


class _Unit:
    """A unit of work that runs an optional callback."""

    def __init__(self, action: object = None) -> None:
        """Create a unit that calls *action* when run."""
        self.action = action
        self.ran = False

    def run(self) -> None:
        """Mark the unit as run and call the action."""
        self.ran = True
        if callable(self.action):
            self.action()


class TestBlockOperations:
    """Verify create, write and read through the facade."""

    def test_round_trip(self) -> None:
        """A written block reads back; an unwritten one is empty."""
        fs = _fs()
        fs.write_block("f", 2, "X")
        assert fs.read_block("f", 2) == "X"
        assert fs.read_block("f", 0) is EMPTY_BLOCK

    def test_duplicate_file_keeps_contents(self) -> None:
        """A rejected duplicate leaves the original file untouched."""
        fs = _fs()
        fs.write_block("f", 1, "keep")
        with pytest.raises(DuplicateFileError):
            fs.create_file("f", 1)
        assert fs.read_block("f", 1) == "keep"
        assert fs.store.length("f") == NUM_BLOCKS

    def test_write_through(self) -> None:
        """Every write is copied into the cache."""
        fs = _fs()
        fs.write_block("f", 3, "Y")
        assert fs.cache.get("f", 3) == "Y"
        assert fs.store.read("f", 3) == "Y"

    def test_read_prefers_cache(self) -> None:
        """A read is answered from the cache when the key is present."""
        fs = _fs()
        fs.write_block("f", 0, "stored")
        fs.cache.put("f", 0, "cached")
        assert fs.read_block("f", 0) == "cached"

    def test_cached_empty_string(self) -> None:
        """An empty string written to a block reads back as written."""
        fs = _fs()
        fs.write_block("f", 0, "")
        assert fs.read_block("f", 0) == ""

    def test_unwritten_read_is_miss(self) -> None:
        """Reading a never-written block falls back to the store."""
        fs = _fs()
        fs.read_block("f", 1)
        assert fs.cache.misses == 1
        assert fs.cache.hits == 0

    def test_unknown_file(self) -> None:
        """Reads and writes on a missing file raise."""
        fs = _fs()
        with pytest.raises(UnknownFileError):
            fs.read_block("nope", 0)
        with pytest.raises(UnknownFileError):
            fs.write_block("nope", 0, "X")

    @pytest.mark.parametrize("index", [-1, NUM_BLOCKS])
    def test_invalid_index(self, index: int) -> None:
        """Out-of-range indices raise and nothing is cached."""
        fs = _fs()
        with pytest.raises(InvalidBlockIndexError):
            fs.write_block("f", index, "X")
        with pytest.raises(InvalidBlockIndexError):
            fs.read_block("f", index)
        assert len(fs.cache) == 0

    def test_errors_are_logged(self) -> None:
        """Failed operations leave an ERROR entry in the log."""
        logger = Logger()
        fs = FileSystem(DiskScheduler(), logger=logger)
        with pytest.raises(UnknownFileError):
            fs.read_block("nope", 0)
        errors = logger.filter(min_level=LogLevel.ERROR, source="fs")
        assert len(errors) == 1
        assert "nope" in errors[0].message

    def test_create_is_logged(self) -> None:
        """Creating a file records an INFO entry."""
        fs = _fs()
        assert any("'f'" in e.message for e in fs.logger.filter(source="fs"))


class TestAdmission:
    """Verify the bounded request counter."""

    def test_admitted_unit_runs(self) -> None:
        """With a free slot the unit runs and the slot is returned."""
        fs = _fs()
        unit = _Unit()
        assert fs.process_request(unit) is AdmissionResult.ADMITTED
        assert unit.ran
        assert fs.current_requests == 0

    def test_counter_held_while_running(self) -> None:
        """The slot is taken for the duration of the unit."""
        fs = _fs(max_requests=2)
        seen: list[int] = []
        fs.process_request(_Unit(lambda: seen.append(fs.current_requests)))
        assert seen == [1]

    def test_rejected_at_capacity(self) -> None:
        """A unit submitted while the only slot is held is not run."""
        fs = _fs(max_requests=1)
        inner = _Unit()
        outcomes: list[AdmissionResult] = []
        outer = _Unit(lambda: outcomes.append(fs.process_request(inner)))

        assert fs.process_request(outer) is AdmissionResult.ADMITTED
        assert outcomes == [AdmissionResult.REJECTED]
        assert not inner.ran

        third = _Unit()
        assert fs.process_request(third) is AdmissionResult.ADMITTED
        assert third.ran

    def test_rejection_is_logged_and_counted(self) -> None:
        """Rejections produce a WARNING and bump the counter."""
        fs = _fs(max_requests=1)
        fs.process_request(_Unit(lambda: fs.process_request(_Unit())))
        warnings = fs.logger.filter(min_level=LogLevel.WARNING)
        assert len(warnings) == 1
        assert fs.rejected_count == 1
        assert fs.admitted_count == 1

    def test_zero_capacity_rejects_everything(self) -> None:
        """With no slots nothing is ever admitted."""
        fs = _fs(max_requests=0)
        unit = _Unit()
        assert fs.process_request(unit) is AdmissionResult.REJECTED
        assert not unit.ran

    def test_failing_unit_releases_slot(self) -> None:
        """A unit that raises still gives its slot back."""
        fs = _fs(max_requests=1)

        def boom() -> None:
            """Fail inside the admitted unit."""
            fs.read_block("nope", 0)

        with pytest.raises(UnknownFileError):
            fs.process_request(_Unit(boom))
        assert fs.current_requests == 0
        assert fs.process_request(_Unit()) is AdmissionResult.ADMITTED

    def test_bounds_hold(self) -> None:
        """The counter stays within [0, max_requests]."""
        max_requests = 3
        fs = _fs(max_requests=max_requests)
        seen: list[int] = []

        def nest(depth: int) -> None:
            """Record the counter and submit a nested unit."""
            seen.append(fs.current_requests)
            if depth:
                fs.process_request(_Unit(lambda: nest(depth - 1)))

        fs.process_request(_Unit(lambda: nest(5)))
        assert max(seen) == max_requests
        assert min(seen) >= 1
        assert fs.current_requests == 0
        assert fs.max_requests == max_requests
