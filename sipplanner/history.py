"""Chronologically ordered NAV histories."""
from __future__ import annotations

import logging
import math
from operator import attrgetter
from typing import Iterable, Iterator, Mapping, Optional, Tuple

import pandas as pd

from .dates import parse_date
from .errors import DuplicateObservationError, HistoryError, MalformedValueError
from .models import ValuationObservation

logger = logging.getLogger(__name__)


def parse_nav(raw: object) -> float:
    """Reads a NAV published as a decimal string (``"123.4567"``)."""
    if isinstance(raw, bool):
        raise MalformedValueError(raw)
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise MalformedValueError(raw) from exc
    if not math.isfinite(value):
        raise MalformedValueError(raw)
    return value


class ValuationHistory:
    """Immutable sequence of observations, always held oldest-first.

    The source publishes newest-first; construction sorts whatever it is
    given, so every consumer sees the same chronological order.
    """

    __slots__ = ("_observations", "_index")

    def __init__(self, observations: Iterable[ValuationObservation] = ()) -> None:
        ordered = sorted(observations, key=attrgetter("date"))
        for previous, current in zip(ordered, ordered[1:]):
            if previous.date == current.date:
                raise DuplicateObservationError(
                    f"Two observations share the date {current.date:%d-%m-%Y}"
                )
        self._observations: Tuple[ValuationObservation, ...] = tuple(ordered)
        self._index = pd.DatetimeIndex([pd.Timestamp(obs.date) for obs in ordered])

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, object]],
        *,
        date_key: str = "date",
        value_key: str = "nav",
    ) -> "ValuationHistory":
        """Builds a history from raw ``{"date": "DD-MM-YYYY", "nav": "..."}`` rows.

        A single malformed row invalidates the whole history.
        """
        observations = []
        for record in records:
            if not isinstance(record, Mapping):
                raise HistoryError(f"NAV row {record!r} is not a mapping")
            observations.append(
                ValuationObservation(
                    date=parse_date(record.get(date_key)),
                    value=parse_nav(record.get(value_key)),
                )
            )
        logger.debug(f"Parsed {len(observations)} NAV observations")
        return cls(observations)

    @property
    def index(self) -> pd.DatetimeIndex:
        return self._index

    @property
    def latest(self) -> Optional[ValuationObservation]:
        return self._observations[-1] if self._observations else None

    @property
    def earliest(self) -> Optional[ValuationObservation]:
        return self._observations[0] if self._observations else None

    def newest_first(self) -> Tuple[ValuationObservation, ...]:
        return tuple(reversed(self._observations))

    def tail(self, count: int) -> "ValuationHistory":
        """The ``count`` most recent observations, still oldest-first."""
        if count <= 0:
            return ValuationHistory()
        return ValuationHistory(self._observations[-count:])

    def to_series(self, name: str = "NAV") -> pd.Series:
        return pd.Series(
            [obs.value for obs in self._observations],
            index=self._index,
            name=name,
            dtype=float,
        )

    def __getitem__(self, position: int) -> ValuationObservation:
        return self._observations[position]

    def __iter__(self) -> Iterator[ValuationObservation]:
        return iter(self._observations)

    def __len__(self) -> int:
        return len(self._observations)

    def __bool__(self) -> bool:
        return bool(self._observations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValuationHistory):
            return NotImplemented
        return self._observations == other._observations

    def __hash__(self) -> int:
        return hash(self._observations)

    def __repr__(self) -> str:
        if not self._observations:
            return "ValuationHistory([])"
        return (
            f"ValuationHistory({len(self)} observations, "
            f"{self.earliest.date:%d-%m-%Y} to {self.latest.date:%d-%m-%Y})"
        )
