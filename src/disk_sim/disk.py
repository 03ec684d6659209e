"""Disk scheduling algorithms — ordering track requests and costing them.

When several block operations are waiting on the disk, the arm has to
move between tracks to service them.  Every move is charged by the
seek-time model (``disk_sim.geometry.seek_time``), so the *order* in
which requests are serviced decides the total time.

Think of a disk arm like an elevator in a building:
    - **FCFS** — stop at every floor in the order people pressed buttons.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **LOOK** — keep going one way while anyone is waiting ahead, then
      turn around (without riding to the top floor first).
    - **Segmented LFU** — split floors into groups and, inside the
      current group, serve the floors that were asked for least often.

Algorithms:
    - ``FCFSPolicy`` — simple and fair, but the arm zigzags.
    - ``SSTFPolicy`` — lowest immediate cost, can starve distant tracks.
    - ``LOOKPolicy`` — sweep with early reversal, bounded wait.
    - ``SegmentedLFUPolicy`` — static-frequency ordering per segment.

All policies implement the ``DiskPolicy`` protocol — the Strategy
pattern.  A policy only decides the order; ``DiskScheduler`` owns the
head position and adds up the seek times.

Policies consume the list they are given: SSTF, LOOK and segmented
LFU remove each request as it is serviced, so the list is empty on
return.  FCFS only iterates.  Pass a copy (``list(queue)``) when the
same queue has to be replayed under several policies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from disk_sim.geometry import (
    DEFAULT_ROTATION_DELAY,
    DEFAULT_SECTORS_PER_TRACK,
    DEFAULT_TRACKS,
    DiskGeometry,
    seek_time,
)
from disk_sim.logging import LogLevel

if TYPE_CHECKING:
    from disk_sim.logging import Logger

DEFAULT_NUM_SEGMENTS = 3
"""Number of buckets used by the segmented LFU policy."""


class Direction(StrEnum):
    """Sweep direction of the disk arm."""

    UP = "up"
    DOWN = "down"

    def reversed(self) -> Direction:
        """Return the opposite direction."""
        return Direction.DOWN if self is Direction.UP else Direction.UP


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    name: str

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the order in which requests should be serviced.

        Args:
            requests: Track numbers to visit.  May be consumed.
            head: Current position of the disk head.

        Returns:
            Ordered list of track numbers.

        """
        ...


class FCFSPolicy:
    """First Come, First Served — service in arrival order.

    Fair (no starvation), but the arm moves wherever the next request
    happens to be, producing high total seek time.
    """

    name = "FCFS"

    def schedule(self, requests: list[int], *, head: int) -> list[int]:  # noqa: ARG002
        """Return requests in their original order."""
        return list(requests)


class SSTFPolicy:
    """Shortest Seek Time First — always go to the nearest request.

    Ties go to the request that appears first in the remaining queue:
    a later candidate only wins when it is *strictly* closer.
    """

    name = "SSTF"

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return requests ordered nearest-first, removing each from *requests*."""
        order: list[int] = []
        current = head
        while requests:
            nearest = requests[0]
            for track in requests[1:]:
                if abs(current - track) < abs(current - nearest):
                    nearest = track
            order.append(nearest)
            requests.remove(nearest)
            current = nearest
        return order


class LOOKPolicy:
    """LOOK — sweep one direction while requests remain ahead, then reverse.

    Unlike SCAN the arm never travels to the edge of the disk; it turns
    around as soon as nothing is left in the current direction.  Turning
    around costs nothing: no request is serviced and no time is charged.

    Requests sitting exactly under the head are in neither direction.
    They are serviced in place once both directions come up empty.

    Args:
        direction: Initial sweep direction for every ``schedule`` call.

    """

    name = "LOOK"

    def __init__(self, *, direction: Direction = Direction.UP) -> None:
        """Create a LOOK policy with an initial sweep direction."""
        self._direction = direction

    @property
    def direction(self) -> Direction:
        """Return the initial sweep direction."""
        return self._direction

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return requests in LOOK order, removing each from *requests*."""
        order: list[int] = []
        direction = self._direction
        current = head
        flipped = False
        while requests:
            target = _nearest_in_direction(requests, current, direction)
            if target is None:
                if not flipped:
                    direction = direction.reversed()
                    flipped = True
                    continue
                # Only requests at the head position remain.
                target = current
            flipped = False
            order.append(target)
            requests.remove(target)
            current = target
        return order


def _nearest_in_direction(requests: list[int], current: int, direction: Direction) -> int | None:
    """Return the closest track strictly ahead of *current*, or None."""
    if direction is Direction.UP:
        ahead = [track for track in requests if track > current]
        return min(ahead) if ahead else None
    behind = [track for track in requests if track < current]
    return max(behind) if behind else None


class SegmentedLFUPolicy:
    """Segmented least-frequently-used ordering.

    Requests are split into ``num_segments`` buckets by
    ``track % num_segments``.  Each bucket keeps a frequency table of its
    tracks, counted once from the original queue — the counts are static
    and never updated as requests are serviced.

    Starting with the segment of the first queued request, the policy
    repeatedly services the track with the lowest count in the active
    segment (ties go to the track that first appeared earliest).  When
    the active segment runs dry it moves on to the next one, wrapping
    around, without servicing anything.

    Args:
        num_segments: Number of buckets (must be at least 1).

    """

    name = "LFU"

    def __init__(self, *, num_segments: int = DEFAULT_NUM_SEGMENTS) -> None:
        """Create a segmented LFU policy."""
        if num_segments < 1:
            msg = f"num_segments must be at least 1, got {num_segments}"
            raise ValueError(msg)
        self._num_segments = num_segments

    @property
    def num_segments(self) -> int:
        """Return the number of segments."""
        return self._num_segments

    def segment_of(self, track: int) -> int:
        """Return the segment index a track belongs to."""
        return track % self._num_segments

    def frequencies(self, requests: list[int]) -> list[dict[int, int]]:
        """Return one frequency table per segment, in first-occurrence order."""
        tables: list[dict[int, int]] = [{} for _ in range(self._num_segments)]
        for track in requests:
            table = tables[self.segment_of(track)]
            table[track] = table.get(track, 0) + 1
        return tables

    def schedule(self, requests: list[int], *, head: int) -> list[int]:  # noqa: ARG002
        """Return requests in segmented LFU order, removing each from *requests*."""
        if not requests:
            return []

        tables = self.frequencies(requests)
        buckets: list[list[int]] = [[] for _ in range(self._num_segments)]
        for track in requests:
            buckets[self.segment_of(track)].append(track)

        order: list[int] = []
        active = self.segment_of(requests[0])
        while requests:
            table = tables[active]
            if not table:
                active = (active + 1) % self._num_segments
                continue
            # min() keeps the first minimum, so ties follow insertion order
            track = min(table, key=table.__getitem__)
            order.append(track)
            requests.remove(track)
            bucket = buckets[active]
            bucket.remove(track)
            if track not in bucket:
                del table[track]
        return order


@dataclass(frozen=True)
class ScheduleResult:
    """Outcome of servicing one request queue.

    Attributes:
        policy: Name of the policy that produced the order.
        order: Tracks in the order they were serviced.
        total_time: Sum of per-request seek times in ms.
        head: Head position after the last request.

    """

    policy: str
    order: list[int]
    total_time: int
    head: int


class DiskScheduler:
    """Disk scheduler — ties a policy to the head and the cost model.

    The scheduler owns the head position.  Each call starts from wherever
    the previous call left the head, whichever policy it used.
    """

    def __init__(
        self,
        *,
        tracks: int = DEFAULT_TRACKS,
        sectors_per_track: int = DEFAULT_SECTORS_PER_TRACK,
        current_track: int = 0,
        rotation_delay: int = DEFAULT_ROTATION_DELAY,
        logger: Logger | None = None,
    ) -> None:
        """Create a scheduler for a disk geometry and initial head position."""
        self._geometry = DiskGeometry(
            tracks=tracks,
            sectors_per_track=sectors_per_track,
            rotation_delay=rotation_delay,
        )
        self._head = current_track
        self._logger = logger

    @classmethod
    def from_geometry(
        cls,
        geometry: DiskGeometry,
        *,
        head: int = 0,
        logger: Logger | None = None,
    ) -> DiskScheduler:
        """Create a scheduler for an existing geometry."""
        return cls(
            tracks=geometry.tracks,
            sectors_per_track=geometry.sectors_per_track,
            current_track=head,
            rotation_delay=geometry.rotation_delay,
            logger=logger,
        )

    @property
    def geometry(self) -> DiskGeometry:
        """Return the disk geometry."""
        return self._geometry

    @property
    def head(self) -> int:
        """Return current head position."""
        return self._head

    def seek_time(self, track: int) -> int:
        """Return the cost of moving from the head to *track* (head does not move)."""
        return seek_time(self._head, track, rotation_delay=self._geometry.rotation_delay)

    def run(self, policy: DiskPolicy, requests: list[int]) -> ScheduleResult:
        """Service *requests* in the order chosen by *policy*.

        Each serviced track adds its seek time to the total and moves
        the head.  An empty queue costs nothing and leaves the head
        where it is.

        Returns:
            The service order, total time and final head position.

        """
        order = policy.schedule(requests, head=self._head)
        total_time = 0
        for track in order:
            total_time += self.seek_time(track)
            self._head = track
        if self._logger is not None:
            self._logger.log(
                LogLevel.DEBUG,
                f"{policy.name}: serviced {len(order)} requests in {total_time} ms, head at {self._head}",
                source="disk",
            )
        return ScheduleResult(policy=policy.name, order=order, total_time=total_time, head=self._head)

    def fcfs(self, queue: list[int]) -> int:
        """Service *queue* first come, first served and return the total time."""
        return self.run(FCFSPolicy(), queue).total_time

    def sstf(self, queue: list[int]) -> int:
        """Service *queue* shortest seek first and return the total time."""
        return self.run(SSTFPolicy(), queue).total_time

    def look(self, queue: list[int]) -> int:
        """Service *queue* with LOOK sweeps and return the total time."""
        return self.run(LOOKPolicy(), queue).total_time

    def lfu(self, queue: list[int], num_segments: int = DEFAULT_NUM_SEGMENTS) -> int:
        """Service *queue* with segmented LFU and return the total time."""
        return self.run(SegmentedLFUPolicy(num_segments=num_segments), queue).total_time

    def __repr__(self) -> str:
        """Return a developer-friendly representation."""
        return f"DiskScheduler(head={self._head}, {self._geometry})"


def compare_policies(
    queue: list[int],
    *,
    scheduler: DiskScheduler | None = None,
    num_segments: int = DEFAULT_NUM_SEGMENTS,
) -> dict[str, ScheduleResult]:
    """Run FCFS, SSTF, LOOK and segmented LFU over copies of *queue*.

    The policies share one scheduler and run in that order, so each
    starts from the head position the previous one left behind.
    *queue* itself is not modified.

    Returns:
        Results keyed by policy name, in run order.

    """
    scheduler = scheduler if scheduler is not None else DiskScheduler()
    policies: list[DiskPolicy] = [
        FCFSPolicy(),
        SSTFPolicy(),
        LOOKPolicy(),
        SegmentedLFUPolicy(num_segments=num_segments),
    ]
    return {policy.name: scheduler.run(policy, list(queue)) for policy in policies}
