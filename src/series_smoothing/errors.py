from __future__ import annotations


class SmoothingError(ValueError):
    """Base class for every error raised by the smoothing filters."""


class InvalidConfiguration(SmoothingError):
    """A filter was constructed with an invalid period, alpha or weights."""


class InvalidInput(SmoothingError):
    """A series cannot be smoothed (missing, empty, too short or non-numeric)."""
