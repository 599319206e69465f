from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from series_smoothing.errors import InvalidConfiguration
from series_smoothing.filters import (
    ExponentialMovingAverage,
    MovingAverage,
    SimpleMovingAverage,
    WeightedMovingAverage,
)
from series_smoothing.types import FilterKind


class InputConfig(BaseModel):
    path: Optional[Path] = None
    column: str = "close"
    has_header: bool = True


class FilterConfig(BaseModel):
    kind: FilterKind = "sma"
    period: Optional[int] = Field(default=None, ge=1)
    alpha: Optional[float] = Field(default=None, gt=0, le=1)
    weights: Optional[list[float]] = None

    def validate_logic(self) -> None:
        if self.kind in ("sma", "ema") and self.period is None:
            raise ValueError(f"filter.period is required for kind={self.kind}")
        if self.kind != "ema" and self.alpha is not None:
            raise ValueError("filter.alpha only applies to kind=ema")
        if self.kind == "wma":
            if self.weights is None and self.period is None:
                raise ValueError("filter.weights or filter.period is required for kind=wma")
            if self.weights is not None and self.period is not None:
                if len(self.weights) != self.period:
                    raise ValueError("filter.period must match len(filter.weights)")
        elif self.weights is not None:
            raise ValueError("filter.weights only applies to kind=wma")


class SmoothingConfig(BaseModel):
    input: InputConfig = Field(default_factory=InputConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)

    def validate_logic(self) -> None:
        self.filter.validate_logic()


def load_smoothing_config(path: Path) -> SmoothingConfig:
    raw = tomllib.loads(path.read_text(encoding="utf-8"))
    cfg = SmoothingConfig.model_validate(raw)
    cfg.validate_logic()
    return cfg


def build_filter(cfg: FilterConfig) -> MovingAverage:
    """
    Build the moving average described by `cfg`.

    A wma without explicit weights gets linear weights over `period` values.
    """
    try:
        cfg.validate_logic()
    except ValueError as e:
        raise InvalidConfiguration(str(e)) from e

    if cfg.kind == "wma" and cfg.weights is not None:
        return WeightedMovingAverage(cfg.weights)
    if cfg.period is None:
        raise InvalidConfiguration(f"filter.period is required for kind={cfg.kind}")
    if cfg.kind == "sma":
        return SimpleMovingAverage(cfg.period)
    if cfg.kind == "ema":
        return ExponentialMovingAverage(cfg.period, cfg.alpha)
    return WeightedMovingAverage.linear(cfg.period)
