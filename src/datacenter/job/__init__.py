# src/datacenter/job/__init__.py
"""
datacenter.job
~~~~~~~~~~~~~~

Immutable job values.  A Job carries an execution time (positive integer),
a memory usage (non-negative integer) and an optional name.

Basic usage::

    from datacenter.job import Job

    job = Job(execution_time=4, memory_usage=5, name="etl")
    job.execution_time   # → 4

Invalid attributes fail fast::

    Job(execution_time=0)   # raises InvalidArgumentError
"""

from datacenter._exceptions import InvalidArgumentError
from datacenter.job.job import Job

__all__ = ["Job", "InvalidArgumentError"]
