from __future__ import annotations


class PlacementError(Exception):
    """Base class for all datacenter placement errors."""


class InvalidArgumentError(PlacementError, ValueError):
    """A job, processor or placement was constructed with invalid arguments."""


class UndefinedMetricError(PlacementError, ArithmeticError):
    """A metric has no defined value for the current placement."""
