from __future__ import annotations

import heapq
import logging
from typing import Iterable, Iterator

import numpy as np

from datacenter._checks import ensure_int
from datacenter.job import Job

logger = logging.getLogger(__name__)


class Processor:
    """
    A processor with a fixed compute-time capacity.

    Jobs enter only through the admission gate (`add_job`) and are never
    removed, so the total execution time of the admitted jobs never exceeds
    `time_limit`.
    """

    # Admitted totals never exceed time_limit, so completion times stay exact in int64.
    MAX_TIME_LIMIT: int = int(np.iinfo(np.int64).max)

    def __init__(self, time_limit: int) -> None:
        self._time_limit: int = ensure_int(
            time_limit, "time_limit", minimum=1, maximum=self.MAX_TIME_LIMIT
        )
        self._jobs: list[Job] = []

    # ── admission ────────────────────────────────────────────────────────

    def can_fit_job(self, job: Job) -> bool:
        return self._time_limit - self.total_computation_time >= job.execution_time

    def add_job(self, job: Job) -> bool:
        if not self.can_fit_job(job):
            logger.debug(
                "Rejected %r: needs %d, %d of %d remaining.",
                job, job.execution_time, self.remaining_time, self._time_limit,
            )
            return False
        self._jobs.append(job)
        logger.debug("Admitted %r; %d remaining.", job, self.remaining_time)
        return True

    def add_jobs(self, jobs: Iterable[Job]) -> list[bool]:
        return [self.add_job(job) for job in jobs]

    # ── schedule views ───────────────────────────────────────────────────

    def scheduled_order(self) -> tuple[Job, ...]:
        """
        Jobs in execution order: shortest execution time first.

        Jobs with equal execution times keep their insertion order.
        """
        heap = [(job.execution_time, seq, job) for seq, job in enumerate(self._jobs)]
        heapq.heapify(heap)
        return tuple(heapq.heappop(heap)[2] for _ in range(len(heap)))

    # Older name for scheduled_order.
    get_jobs = scheduled_order

    def insertion_order(self) -> tuple[Job, ...]:
        return tuple(self._jobs)

    def completion_times(self) -> np.ndarray:
        """Completion time of each job in `scheduled_order()`, measured from 0."""
        durations = np.fromiter(
            (job.execution_time for job in self.scheduled_order()),
            dtype=np.int64,
            count=len(self._jobs),
        )
        return np.cumsum(durations)

    # ── aggregates ───────────────────────────────────────────────────────

    @property
    def time_limit(self) -> int:
        return self._time_limit

    @property
    def peak_memory_usage(self) -> int:
        return max((job.memory_usage for job in self._jobs), default=0)

    @property
    def total_computation_time(self) -> int:
        return sum(job.execution_time for job in self._jobs)

    @property
    def remaining_time(self) -> int:
        return self._time_limit - self.total_computation_time

    # ── dunder ───────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Processor):
            return NotImplemented
        return self._time_limit == other._time_limit and self._jobs == other._jobs

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(self._jobs)

    def __repr__(self) -> str:
        return (
            f"Processor(time_limit={self._time_limit}, "
            f"jobs={len(self._jobs)}, "
            f"total_computation_time={self.total_computation_time})"
        )
