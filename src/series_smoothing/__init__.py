__all__ = [
    "PADDING_VALUE",
    "ExponentialMovingAverage",
    "InvalidConfiguration",
    "InvalidInput",
    "MovingAverage",
    "SimpleMovingAverage",
    "SmoothingError",
    "TransformResult",
    "WeightedMovingAverage",
]

__version__ = "0.1.0"

from series_smoothing.errors import InvalidConfiguration, InvalidInput, SmoothingError
from series_smoothing.filters import (
    ExponentialMovingAverage,
    MovingAverage,
    SimpleMovingAverage,
    WeightedMovingAverage,
)
from series_smoothing.types import PADDING_VALUE, TransformResult
