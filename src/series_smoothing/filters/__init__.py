__all__ = [
    "ExponentialMovingAverage",
    "MovingAverage",
    "SimpleMovingAverage",
    "WeightedMovingAverage",
]

from series_smoothing.filters.base import MovingAverage
from series_smoothing.filters.exponential import ExponentialMovingAverage
from series_smoothing.filters.simple import SimpleMovingAverage
from series_smoothing.filters.weighted import WeightedMovingAverage
