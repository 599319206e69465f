from __future__ import annotations

import logging

from series_smoothing.filters.base import MovingAverage, check_period
from series_smoothing.math_utils import mean
from series_smoothing.types import PADDING_VALUE, Series

logger = logging.getLogger(__name__)


class SimpleMovingAverage(MovingAverage):
    """
    Arithmetic mean over a sliding window of `period` values.

    The output has the input's length. Index `period - 1` holds the mean of
    the first full window; earlier positions hold the padding value. Each
    later value is derived from the previous one in O(1).
    """

    filter_id = "sma"

    def __init__(self, period: int) -> None:
        self._period = check_period(period)

    @property
    def period(self) -> int:
        return self._period

    @property
    def min_length(self) -> int:
        return self._period

    def transform(self, series: Series) -> list[float]:
        values = self._coerce(series)
        period = self._period

        a = mean(values[:period])
        out = [PADDING_VALUE] * (period - 1)
        out.append(a)
        # Slide: drop the value leaving the window, add the one entering it.
        for leaving, entering in zip(values, values[period:]):
            a += (entering - leaving) / period
            out.append(a)

        logger.debug(
            "sma_done",
            extra={"filter_id": self.filter_id, "period": period, "size": len(out)},
        )
        return out

    def __repr__(self) -> str:
        return f"SimpleMovingAverage(period={self._period})"
