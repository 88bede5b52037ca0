"""Exceptions raised by the computation core."""
from __future__ import annotations


class SIPPlannerError(Exception):
    """Base class for every error raised by this package."""


class HistoryError(SIPPlannerError):
    """A valuation history cannot be used for computation."""


class MalformedDateError(HistoryError):
    """Raised when a date is not a valid ``DD-MM-YYYY`` calendar date."""

    def __init__(self, raw: object, reason: str = "expected DD-MM-YYYY") -> None:
        super().__init__(f"Malformed date {raw!r}: {reason}")
        self.raw = raw


class MalformedValueError(HistoryError):
    """Raised when a NAV cannot be read as a finite decimal number."""

    def __init__(self, raw: object) -> None:
        super().__init__(f"Malformed NAV value {raw!r}")
        self.raw = raw


class DuplicateObservationError(HistoryError):
    """Raised when two observations share the same date."""
