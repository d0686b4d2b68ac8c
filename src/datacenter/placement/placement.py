from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Optional, Union

import numpy as np

from datacenter._exceptions import InvalidArgumentError, UndefinedMetricError
from datacenter.processor import Processor

logger = logging.getLogger(__name__)


class MedianMethod(str, Enum):
    """How the median of an even number of flow times is taken."""
    # Average of the two middle values, indices n/2 - 1 and n/2.
    CONVENTIONAL = "conventional"
    # Legacy indexing: average of indices n/2 and n/2 + 1.
    # Undefined when n/2 + 1 is past the end.
    REFERENCE = "reference"


MedianMethodLike = Union[MedianMethod, str]


def _as_median_method(method: MedianMethodLike) -> MedianMethod:
    try:
        return MedianMethod(method)
    except ValueError:
        valid = ", ".join(repr(m.value) for m in MedianMethod)
        raise InvalidArgumentError(
            f"Unknown median method {method!r}; expected one of {valid}."
        ) from None


class Placement:
    """
    An ordered collection of processors and the metrics derived from it.

    Metrics are recomputed on every call.  Cost and makespan are 0 for a
    placement without work; the flow-time metrics raise
    UndefinedMetricError instead, since a mean or median of nothing has no
    value.
    """

    DEFAULT_MEDIAN_METHOD: MedianMethod = MedianMethod.CONVENTIONAL

    def __init__(self, median_method: Optional[MedianMethodLike] = None) -> None:
        self._processors: list[Processor] = []
        self._median_method: MedianMethod = _as_median_method(
            self.DEFAULT_MEDIAN_METHOD if median_method is None else median_method
        )

    def add_processor(self, processor: Processor) -> None:
        self._processors.append(processor)

    def add_processors(self, processors: Iterable[Processor]) -> None:
        for processor in processors:
            self.add_processor(processor)

    # ── aggregates ───────────────────────────────────────────────────────

    @property
    def processors(self) -> tuple[Processor, ...]:
        return tuple(self._processors)

    @property
    def median_method(self) -> MedianMethod:
        return self._median_method

    @property
    def cost(self) -> int:
        return sum(p.peak_memory_usage for p in self._processors)

    @property
    def makespan(self) -> int:
        return max((p.total_computation_time for p in self._processors), default=0)

    @property
    def job_count(self) -> int:
        return sum(len(p) for p in self._processors)

    # ── flow times ───────────────────────────────────────────────────────

    def flow_times(self) -> np.ndarray:
        """
        Flow time of every job, processor by processor.

        Each processor runs its jobs back to back in `scheduled_order()`
        starting at 0, so a job's flow time is its completion time on its
        own processor.  The result is not sorted.
        """
        if not self._processors:
            return np.empty(0, dtype=np.int64)
        return np.concatenate([p.completion_times() for p in self._processors])

    def mean_flow_time(self) -> float:
        ft = self.flow_times()
        if ft.size == 0:
            logger.debug("Mean flow time requested for a placement without jobs.")
            raise UndefinedMetricError("Mean flow time is undefined: no jobs are placed.")
        return float(ft.mean())

    def median_flow_time(self, method: Optional[MedianMethodLike] = None) -> float:
        """
        Median flow time over all jobs.

        `method` overrides the placement's median method for this call.
        With MedianMethod.REFERENCE an even count averages the values at
        indices n/2 and n/2 + 1 of the sorted flow times, which raises
        UndefinedMetricError when n == 2.
        """
        how = self._median_method if method is None else _as_median_method(method)
        ft = np.sort(self.flow_times())
        n = ft.size
        if n == 0:
            logger.debug("Median flow time requested for a placement without jobs.")
            raise UndefinedMetricError("Median flow time is undefined: no jobs are placed.")

        mid = n // 2
        if n % 2 == 1:
            return float(ft[mid])

        if how is MedianMethod.CONVENTIONAL:
            lo, hi = mid - 1, mid
        else:
            lo, hi = mid, mid + 1
            if hi >= n:
                logger.debug("Reference median needs index %d of %d flow times.", hi, n)
                raise UndefinedMetricError(
                    f"Median flow time is undefined under the {how.value!r} method "
                    f"for {n} flow times: index {hi} is out of range."
                )
        return (int(ft[lo]) + int(ft[hi])) / 2.0

    # ── dunder ───────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Placement):
            return NotImplemented
        return (
            len(self._processors) == len(other._processors)
            and all(a == b for a, b in zip(self._processors, other._processors))
        )

    def __len__(self) -> int:
        return len(self._processors)

    def __iter__(self) -> Iterator[Processor]:
        return iter(self._processors)

    def __repr__(self) -> str:
        return (
            f"Placement(processors={len(self._processors)}, "
            f"jobs={self.job_count}, "
            f"median_method={self._median_method.value!r})"
        )
