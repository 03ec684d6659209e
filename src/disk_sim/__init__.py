"""disk-sim — rotating-disk head scheduling with a small block file store."""

from disk_sim.disk import (
    DiskScheduler,
    FCFSPolicy,
    LOOKPolicy,
    ScheduleResult,
    SegmentedLFUPolicy,
    SSTFPolicy,
    compare_policies,
)
from disk_sim.fs import AdmissionResult, FileSystem
from disk_sim.geometry import DiskGeometry, seek_time

__all__ = [
    "AdmissionResult",
    "DiskGeometry",
    "DiskScheduler",
    "FCFSPolicy",
    "FileSystem",
    "LOOKPolicy",
    "SSTFPolicy",
    "ScheduleResult",
    "SegmentedLFUPolicy",
    "compare_policies",
    "seek_time",
]
