"""Disk geometry and the seek-time cost model.

Every serviced request is charged for two things:

- **Arm movement** — proportional to how many tracks the head crosses.
  The model combines a per-track move cost with an additional
  outer-track move cost, both scaled by the distance travelled.
- **Rotational latency** — a fixed wait for the platter to bring the
  sector under the head, paid once per request even if the head
  does not move.

The model is deliberately linear: direction does not matter, only the
magnitude of the move.  Track numbers are never checked against the
geometry, so an out-of-range target is still costed arithmetically.
"""

from dataclasses import dataclass

DEFAULT_TRACKS = 500
"""Number of tracks on the simulated disk surface."""

DEFAULT_SECTORS_PER_TRACK = 100
"""Sectors on each track."""

DEFAULT_ROTATION_DELAY = 8
"""Rotational latency in ms, charged once per serviced request."""

TRACK_MOVE_COST_MS = 10
"""Time to move the arm across one track."""

OUTER_TRACK_MOVE_COST_MS = 130
"""Additional outer-track move cost, also charged per track crossed."""


@dataclass(frozen=True)
class DiskGeometry:
    """Immutable description of the simulated disk.

    Attributes:
        tracks: Number of tracks (must be positive).
        sectors_per_track: Sectors on each track (must be positive).
        rotation_delay: Rotational latency in ms (must be non-negative).

    """

    tracks: int = DEFAULT_TRACKS
    sectors_per_track: int = DEFAULT_SECTORS_PER_TRACK
    rotation_delay: int = DEFAULT_ROTATION_DELAY

    def __post_init__(self) -> None:
        """Reject impossible geometries."""
        if self.tracks <= 0:
            msg = f"tracks must be positive, got {self.tracks}"
            raise ValueError(msg)
        if self.sectors_per_track <= 0:
            msg = f"sectors_per_track must be positive, got {self.sectors_per_track}"
            raise ValueError(msg)
        if self.rotation_delay < 0:
            msg = f"rotation_delay must be non-negative, got {self.rotation_delay}"
            raise ValueError(msg)

    @property
    def total_sectors(self) -> int:
        """Return the number of addressable sectors on the disk."""
        return self.tracks * self.sectors_per_track


def seek_time(current: int, target: int, *, rotation_delay: int) -> int:
    """Return the time in ms to service *target* with the head at *current*.

    ``distance * 10 + distance * 130 + rotation_delay``, i.e.
    ``distance * 140 + rotation_delay``.
    """
    distance = abs(current - target)
    track_seek = distance * TRACK_MOVE_COST_MS
    outer_track_seek = distance * OUTER_TRACK_MOVE_COST_MS
    return track_seek + outer_track_seek + rotation_delay
