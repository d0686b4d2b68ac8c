# src/datacenter/placement/__init__.py
"""
datacenter.placement
~~~~~~~~~~~~~~~~~~~~

Placements of jobs on processors and the scheduling metrics derived from
them: cost, makespan, mean and median flow time.

Basic usage::

    from datacenter.job import Job
    from datacenter.processor import Processor
    from datacenter.placement import Placement

    proc = Processor(10)
    proc.add_job(Job(4, 5))
    proc.add_job(Job(5, 9))

    placement = Placement()
    placement.add_processor(proc)

    placement.cost               # → 9
    placement.makespan           # → 9
    placement.mean_flow_time()   # → 6.5

Median of an even number of flow times::

    placement.median_flow_time()                       # → 6.5
    placement.median_flow_time(method="reference")     # raises UndefinedMetricError

Public API
----------
Placement             The main class.
MedianMethod          Even-count median convention.
UndefinedMetricError  Raised when a flow-time metric has no value.
"""

from __future__ import annotations

from datacenter._exceptions import (
    InvalidArgumentError,
    PlacementError,
    UndefinedMetricError,
)
from datacenter.placement.placement import MedianMethod, Placement

__all__ = [
    "Placement",
    "MedianMethod",
    "PlacementError",
    "InvalidArgumentError",
    "UndefinedMetricError",
]
