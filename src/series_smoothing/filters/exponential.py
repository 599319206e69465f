from __future__ import annotations

import logging
import math
from typing import Optional

from series_smoothing.errors import InvalidConfiguration
from series_smoothing.filters.base import MovingAverage, check_period
from series_smoothing.types import Series

logger = logging.getLogger(__name__)


class ExponentialMovingAverage(MovingAverage):
    """
    Recursive smoothing: y[0] = x[0], y[i] = alpha * x[i] + (1 - alpha) * y[i-1].

    When `alpha` is omitted it is derived from the period as 2 / (period + 1).
    """

    filter_id = "ema"

    def __init__(self, period: int, alpha: Optional[float] = None) -> None:
        self._period = check_period(period)
        if alpha is None:
            alpha = 2.0 / (period + 1)
        if isinstance(alpha, bool):
            raise InvalidConfiguration(f"alpha must be a number, got {alpha!r}")
        try:
            alpha = float(alpha)
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"alpha must be a number, got {alpha!r}") from e
        if math.isnan(alpha) or not (0.0 < alpha <= 1.0):
            raise InvalidConfiguration(f"alpha must be within (0, 1], got {alpha}")
        self._alpha = alpha

    @classmethod
    def from_period(cls, period: int) -> ExponentialMovingAverage:
        return cls(period)

    @property
    def period(self) -> int:
        return self._period

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def min_length(self) -> int:
        return 1

    def transform(self, series: Series) -> list[float]:
        values = self._coerce(series)
        alpha = self._alpha
        alpha_1 = 1.0 - alpha

        y = values[0]
        out = [y]
        for x in values[1:]:
            y = x * alpha + y * alpha_1
            out.append(y)

        logger.debug(
            "ema_done",
            extra={"filter_id": self.filter_id, "alpha": alpha, "size": len(out)},
        )
        return out

    def __repr__(self) -> str:
        return f"ExponentialMovingAverage(period={self._period}, alpha={self._alpha})"
