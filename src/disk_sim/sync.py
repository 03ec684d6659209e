"""Admission permits — a bounded, non-blocking counting semaphore.

A counting semaphore hands out up to *N* permits.  Think of a parking
lot with N spaces: each car that enters takes a space, each car that
leaves frees one.  Here a full lot does not make anyone wait: the
caller is told "no" straight away and decides what to do.  The file
system uses this to turn away work once ``max_requests`` units are in
flight.
"""


class Semaphore:
    """Counting semaphore with a fixed number of permits.

    ``try_acquire`` takes a permit if one is free; ``release`` gives one
    back.  The count can never go below zero or above the number of
    permits the semaphore was created with.
    """

    def __init__(self, *, name: str, count: int) -> None:
        """Create a semaphore with *count* free permits.

        Raises:
            ValueError: If count is negative.

        """
        if count < 0:
            msg = f"Semaphore count must be non-negative, got {count}"
            raise ValueError(msg)
        self._name = name
        self._count = count
        self._max_count = count

    @property
    def name(self) -> str:
        """Return the semaphore name."""
        return self._name

    @property
    def count(self) -> int:
        """Return the number of free permits."""
        return self._count

    @property
    def max_count(self) -> int:
        """Return the total number of permits."""
        return self._max_count

    @property
    def in_use(self) -> int:
        """Return the number of permits currently held."""
        return self._max_count - self._count

    def try_acquire(self) -> bool:
        """Take a permit if one is free.

        Returns:
            True if a permit was taken, False if none were available.

        """
        if self._count > 0:
            self._count -= 1
            return True
        return False

    def release(self) -> None:
        """Give a permit back.

        Raises:
            ValueError: If every permit is already free.

        """
        if self._count >= self._max_count:
            msg = f"Semaphore '{self._name}' would exceed max count ({self._max_count})"
            raise ValueError(msg)
        self._count += 1

    def __repr__(self) -> str:
        """Return a developer-friendly representation."""
        return f"Semaphore('{self._name}', count={self._count}/{self._max_count})"
