from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, Optional, Sequence, SupportsFloat, Union

from series_smoothing.errors import SmoothingError

FilterKind = Literal["sma", "ema", "wma"]

Number = Union[SupportsFloat, Decimal]
Series = Sequence[Number]

# Emitted for positions without enough history to compute a value.
PADDING_VALUE = 0.0


@dataclass(frozen=True)
class TransformResult:
    values: Optional[list[float]] = None
    error: Optional[SmoothingError] = None

    def __post_init__(self) -> None:
        if (self.values is None) == (self.error is None):
            raise ValueError("exactly one of values or error must be set")

    @property
    def ok(self) -> bool:
        return self.error is None
