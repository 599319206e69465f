from __future__ import annotations

import logging
import math
from typing import Sequence

from series_smoothing.errors import InvalidConfiguration
from series_smoothing.filters.base import MovingAverage, check_period
from series_smoothing.math_utils import WEIGHTS_TOLERANCE, dot, is_normalized
from series_smoothing.types import PADDING_VALUE, Series

logger = logging.getLogger(__name__)


class WeightedMovingAverage(MovingAverage):
    """
    Weighted sum over the `len(weights)` values preceding each position.

    weights[0] applies to the oldest value in the window and weights[-1] to
    the newest. The first `len(weights)` outputs are padding.
    """

    filter_id = "wma"

    def __init__(self, weights: Sequence[float]) -> None:
        if weights is None:
            raise InvalidConfiguration("weights are not defined")
        try:
            ws = tuple(float(w) for w in weights)
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"weights must be numbers: {e}") from e
        if not ws:
            raise InvalidConfiguration("weights are empty")
        if not all(math.isfinite(w) for w in ws):
            raise InvalidConfiguration("weights must be finite")
        if not is_normalized(ws):
            raise InvalidConfiguration(
                f"weights must sum to 1.0 (+/- {WEIGHTS_TOLERANCE}), got {math.fsum(ws)}"
            )
        self._weights = ws

    @classmethod
    def linear(cls, period: int) -> WeightedMovingAverage:
        """Linearly increasing weights 1..period, normalized, newest heaviest."""
        n = check_period(period)
        total = n * (n + 1) / 2
        return cls([k / total for k in range(1, n + 1)])

    @property
    def weights(self) -> tuple[float, ...]:
        return self._weights

    @property
    def period(self) -> int:
        return len(self._weights)

    @property
    def min_length(self) -> int:
        # At least one value must follow the first full window.
        return len(self._weights) + 1

    def transform(self, series: Series) -> list[float]:
        values = self._coerce(series)
        n = len(self._weights)

        out = [PADDING_VALUE] * n
        for i in range(n, len(values)):
            out.append(dot(values[i - n : i], self._weights))

        logger.debug(
            "wma_done",
            extra={"filter_id": self.filter_id, "period": n, "size": len(out)},
        )
        return out

    def __repr__(self) -> str:
        return f"WeightedMovingAverage(weights={list(self._weights)})"
