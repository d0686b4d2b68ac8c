from __future__ import annotations

from typing import Any, Optional

import numpy as np

from datacenter._exceptions import InvalidArgumentError


def ensure_int(value: Any, name: str, *, minimum: int, maximum: Optional[int] = None) -> int:
    # bool is an int subclass but never a meaningful duration or size.
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(
            f"{name} must be an integer; got {type(value).__name__}."
        )
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}; got {value}.")
    if maximum is not None and value > maximum:
        raise InvalidArgumentError(f"{name} must be <= {maximum}; got {value}.")
    return int(value)
