from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from datacenter._checks import ensure_int
from datacenter._exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Job:
    """
    A compute job with a fixed resource footprint.

    Jobs are plain values: two jobs with the same execution time, memory
    usage and name compare equal, and the same job may be handed to more
    than one processor.
    """

    execution_time: int
    memory_usage: int = 0
    name: Optional[str] = None

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise numpy integers through object.__setattr__.
        object.__setattr__(
            self, "execution_time", ensure_int(self.execution_time, "execution_time", minimum=1)
        )
        object.__setattr__(
            self, "memory_usage", ensure_int(self.memory_usage, "memory_usage", minimum=0)
        )
        if self.name is not None and not isinstance(self.name, str):
            raise InvalidArgumentError(
                f"name must be a string or None; got {type(self.name).__name__}."
            )

    def __repr__(self) -> str:
        label = f", name={self.name!r}" if self.name is not None else ""
        return (
            f"Job(execution_time={self.execution_time}, "
            f"memory_usage={self.memory_usage}{label})"
        )
