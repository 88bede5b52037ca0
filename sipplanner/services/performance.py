"""Trailing return analytics over a NAV history."""
from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Iterable, Mapping, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta

from ..config import PERFORMANCE_PERIODS
from ..dates import closest_observation_at_or_before
from ..history import ValuationHistory
from ..models import (
    LookbackKind,
    LookbackRule,
    PerformancePeriodSpec,
    PerformanceReport,
    PeriodReturn,
    ReturnConvention,
    ValuationObservation,
)

logger = logging.getLogger(__name__)


def resolve_past_date(lookback: LookbackRule, anchor: date) -> date:
    """Target date of the reference observation, relative to ``anchor``."""
    if lookback.kind == LookbackKind.DAYS_BEFORE:
        return anchor - timedelta(days=lookback.count)
    if lookback.kind == LookbackKind.YEAR_TO_DATE:
        return date(anchor.year, 1, 1)
    if lookback.kind == LookbackKind.YEARS_BEFORE:
        return anchor - relativedelta(years=lookback.count)
    raise ValueError(f"Unsupported lookback kind: {lookback.kind}")


def simple_return(current: float, past: float) -> Optional[float]:
    """Percent change from ``past`` to ``current``; ``None`` when undefined."""
    if past <= 0:
        return None
    result = (current / past - 1) * 100
    return result if math.isfinite(result) else None


def annualised_return(current: float, past: float, years: int) -> Optional[float]:
    """Geometric mean yearly return over ``years``; ``None`` when undefined."""
    if years <= 0:
        raise ValueError("Annualised returns need a positive number of years")
    if past <= 0 or current < 0:
        return None
    result = ((current / past) ** (1 / years) - 1) * 100
    return result if math.isfinite(result) else None


class PerformanceAnalyzer:
    """Computes the return of every catalogue period.

    All lookbacks are anchored on the latest observation of the history,
    never on the wall clock, so stale data yields returns as of its own date.
    """

    def __init__(self, periods: Sequence[PerformancePeriodSpec] | None = None) -> None:
        self._periods = tuple(periods) if periods is not None else PERFORMANCE_PERIODS

    @property
    def periods(self) -> tuple[PerformancePeriodSpec, ...]:
        return self._periods

    def compute_all(
        self,
        history: Union[ValuationHistory, Iterable[ValuationObservation]],
    ) -> PerformanceReport:
        if not isinstance(history, ValuationHistory):
            history = ValuationHistory(history)

        latest = history.latest
        if latest is None:
            return PerformanceReport()

        entries = tuple(self._compute_period(period, history, latest) for period in self._periods)
        return PerformanceReport(
            entries=entries,
            anchor_date=latest.date,
            current_value=latest.value,
        )

    def compute_from_records(self, records: Iterable[Mapping[str, object]]) -> PerformanceReport:
        """Parses raw source rows and computes the report.

        Raises ``MalformedDateError`` or ``MalformedValueError`` before any
        period is evaluated when a row is unusable.
        """
        return self.compute_all(ValuationHistory.from_records(records))

    def _compute_period(
        self,
        period: PerformancePeriodSpec,
        history: ValuationHistory,
        latest: ValuationObservation,
    ) -> PeriodReturn:
        past_date = resolve_past_date(period.lookback, latest.date)
        reference = closest_observation_at_or_before(history, past_date)
        if reference is None or reference.date >= latest.date:
            logger.debug(f"{period.label}: no observation before {past_date:%d-%m-%Y}")
            return PeriodReturn(period.label, None)

        if period.convention == ReturnConvention.ANNUALISED:
            value = annualised_return(latest.value, reference.value, period.lookback.count)
        else:
            value = simple_return(latest.value, reference.value)

        if value is None:
            logger.warning(
                f"{period.label}: return undefined for reference NAV {reference.value} "
                f"on {reference.date:%d-%m-%Y}"
            )
        return PeriodReturn(period.label, value)
