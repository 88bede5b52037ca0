"""Date parsing and nearest-prior lookups over valuation histories."""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import TYPE_CHECKING, Iterable, Optional, Union

import pandas as pd

from .config import DATE_FORMAT
from .errors import MalformedDateError
from .models import ValuationObservation

if TYPE_CHECKING:
    from .history import ValuationHistory

_DATE_PATTERN = re.compile(r"([0-9]{2})-([0-9]{2})-([0-9]{4})")


def parse_date(raw: object) -> date:
    """Parses a ``DD-MM-YYYY`` date as published by the NAV source."""
    if not isinstance(raw, str):
        raise MalformedDateError(raw, "not a string")
    match = _DATE_PATTERN.fullmatch(raw)
    if match is None:
        raise MalformedDateError(raw)
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise MalformedDateError(raw, str(exc)) from exc


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def closest_observation_at_or_before(
    history: Union["ValuationHistory", Iterable[ValuationObservation]],
    target: Union[date, datetime, pd.Timestamp],
) -> Optional[ValuationObservation]:
    """Returns the most recent observation dated on or before ``target``.

    ``None`` means the target predates the whole history. Plain iterables are
    accepted in any order; they are normalised into a chronological history
    first, which also enforces date uniqueness.
    """
    from .history import ValuationHistory

    if not isinstance(history, ValuationHistory):
        history = ValuationHistory(history)
    if not history:
        return None

    index = history.index
    found = index.asof(pd.Timestamp(target).normalize())
    if pd.isna(found):
        return None
    return history[index.get_loc(found)]
