from __future__ import annotations

import math
from typing import Sequence

WEIGHTS_TOLERANCE = 1e-2


def mean(values: Sequence[float]) -> float:
    if not values:
        raise ValueError("not enough values")
    return math.fsum(values) / len(values)


def is_normalized(weights: Sequence[float], tolerance: float = WEIGHTS_TOLERANCE) -> bool:
    return abs(math.fsum(weights) - 1.0) < tolerance


def dot(values: Sequence[float], weights: Sequence[float]) -> float:
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    total = 0.0
    for value, weight in zip(values, weights):
        total += value * weight
    return total
