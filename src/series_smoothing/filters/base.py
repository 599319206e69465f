from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from series_smoothing.errors import InvalidConfiguration, InvalidInput, SmoothingError
from series_smoothing.types import FilterKind, Series, TransformResult

logger = logging.getLogger(__name__)


def check_period(period: int) -> int:
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidConfiguration(f"period must be an int, got {period!r}")
    if period <= 0:
        raise InvalidConfiguration(f"period must be > 0, got {period}")
    return period


class MovingAverage(ABC):
    """
    A smoothing stage: turns a numeric series into a new series of floats.

    Implementations hold only their own immutable configuration, so one
    instance can be reused (and shared between threads) across any number of
    series.
    """

    filter_id: FilterKind

    @property
    @abstractmethod
    def min_length(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def transform(self, series: Series) -> list[float]:
        raise NotImplementedError

    def apply(self, series: Series) -> TransformResult:
        """Run `transform`, returning the failure instead of raising it."""
        try:
            return TransformResult(values=self.transform(series))
        except SmoothingError as e:
            logger.debug("transform_failed", extra={"filter_id": self.filter_id})
            return TransformResult(error=e)

    def _coerce(self, series: Series) -> list[float]:
        if series is None:
            raise InvalidInput(f"cannot compute {self.filter_id} for undefined series")
        if isinstance(series, (str, bytes, bytearray)):
            raise InvalidInput(
                f"cannot compute {self.filter_id} for text; pass a sequence of numbers"
            )
        values: list[float] = []
        for i, raw in enumerate(series):
            try:
                value = float(raw)
            except (TypeError, ValueError) as e:
                raise InvalidInput(f"series[{i}] is not numeric: {raw!r}") from e
            if not math.isfinite(value):
                raise InvalidInput(f"series[{i}] is not finite: {raw!r}")
            values.append(value)
        if not values:
            raise InvalidInput(f"cannot compute {self.filter_id} for empty series")
        if len(values) < self.min_length:
            raise InvalidInput(
                f"{self.filter_id} needs at least {self.min_length} values, got {len(values)}"
            )
        return values
