__all__ = [
    "FilterConfig",
    "InputConfig",
    "SmoothingConfig",
    "build_filter",
    "load_smoothing_config",
]

from series_smoothing.config.smoothing import (
    FilterConfig,
    InputConfig,
    SmoothingConfig,
    build_filter,
    load_smoothing_config,
)
