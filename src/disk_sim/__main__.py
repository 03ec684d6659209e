"""Reference run: cost the sample queue under every policy, then replay a workload.

Usage::

    python -m disk_sim
"""

import random

from disk_sim.disk import DiskScheduler, compare_policies
from disk_sim.fs import FileSystem
from disk_sim.logging import Logger
from disk_sim.workload import Process, create_files, generate_requests

SAMPLE_QUEUE = [143, 86, 147, 91, 171, 19, 62, 96, 78, 9, 10]
"""Track queue costed by the reference run."""

_WORKLOAD_SIZE = 100_000
_WORKLOAD_SEED = 0


def main() -> None:
    """Print the time each policy needs for ``SAMPLE_QUEUE``."""
    logger = Logger()
    scheduler = DiskScheduler(logger=logger)
    fs = FileSystem(scheduler, logger=logger)
    create_files(fs)
    requests = generate_requests(_WORKLOAD_SIZE, rng=random.Random(_WORKLOAD_SEED))
    outcome = fs.process_request(Process(fs, requests))

    for name, result in compare_policies(SAMPLE_QUEUE, scheduler=scheduler).items():
        print(f"{name} Time: {result.total_time} ms")  # noqa: T201
    print("__________________________________")  # noqa: T201
    print(f"Workload {outcome}: {len(fs.cache)} blocks cached, {fs.cache.hits} cache hits")  # noqa: T201


if __name__ == "__main__":
    main()
