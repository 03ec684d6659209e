"""Tests for the admission semaphore.

A Semaphore hands out a fixed number of permits.  Like a parking lot
with N spaces, a full lot turns new arrivals away instead of queueing
them.
"""

import pytest

from disk_sim.sync import Semaphore

PERMITS = 2


class TestSemaphore:
    """Verify permit accounting."""

    def test_starts_full(self) -> None:
        """A new semaphore has every permit free."""
        sem = Semaphore(name="s", count=PERMITS)
        assert sem.count == PERMITS
        assert sem.max_count == PERMITS
        assert sem.in_use == 0

    def test_acquire_until_exhausted(self) -> None:
        """Acquires succeed until no permits are left."""
        sem = Semaphore(name="s", count=PERMITS)
        assert sem.try_acquire()
        assert sem.try_acquire()
        assert not sem.try_acquire()
        assert sem.in_use == PERMITS

    def test_release_frees_permit(self) -> None:
        """Releasing makes a permit available again."""
        sem = Semaphore(name="s", count=1)
        sem.try_acquire()
        sem.release()
        assert sem.count == 1
        assert sem.try_acquire()

    def test_over_release_rejected(self) -> None:
        """Releasing more than was acquired is an error."""
        sem = Semaphore(name="s", count=1)
        with pytest.raises(ValueError, match="exceed"):
            sem.release()

    def test_negative_count_rejected(self) -> None:
        """A negative permit count is invalid."""
        with pytest.raises(ValueError, match="non-negative"):
            Semaphore(name="s", count=-1)

    def test_repr(self) -> None:
        """The repr shows name and free/total permits."""
        assert repr(Semaphore(name="requests", count=3)) == "Semaphore('requests', count=3/3)"
