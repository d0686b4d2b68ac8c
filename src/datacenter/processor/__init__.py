# src/datacenter/processor/__init__.py
"""
datacenter.processor
~~~~~~~~~~~~~~~~~~~~

Capacity-bounded processors.  A Processor holds jobs whose execution times
sum to at most its time limit.  Admission is checked on every insert and a
job that does not fit is refused, not raised.

Basic usage::

    from datacenter.job import Job
    from datacenter.processor import Processor

    proc = Processor(10)
    proc.add_job(Job(4, 5))    # → True
    proc.add_job(Job(5, 9))    # → True
    proc.add_job(Job(3, 1))    # → False, would total 12

    proc.peak_memory_usage         # → 9
    proc.total_computation_time    # → 9

Two views of the jobs are kept apart::

    proc.scheduled_order()     # shortest execution time first
    proc.insertion_order()     # order in which add_job admitted them
"""

from datacenter._exceptions import InvalidArgumentError
from datacenter.processor.processor import Processor

__all__ = ["Processor", "InvalidArgumentError"]
