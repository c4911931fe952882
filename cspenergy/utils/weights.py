from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from cspenergy.errors import WeightLengthError
from cspenergy.models import UnitWeight


def normalize_weights(weights: Optional[Sequence[Any]], expected: int, what: str) -> Sequence[Any]:
    """Validate the length of ``weights`` and freeze them; ``None`` means unit weights."""
    if weights is None:
        return UnitWeight(expected)
    if len(weights) != expected:
        raise WeightLengthError(
            f"length of weights must be equal to the number of {what} {expected}, got: {len(weights)}"
        )
    if isinstance(weights, UnitWeight):
        return weights
    if isinstance(weights, np.ndarray):
        frozen = weights.copy()
        frozen.flags.writeable = False
        return frozen
    return tuple(weights)


def same_weights(a: Sequence[Any], b: Sequence[Any]) -> bool:
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))
