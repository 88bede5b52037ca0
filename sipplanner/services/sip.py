"""SIP future value projection."""
from __future__ import annotations

import logging
import math
from typing import List

import pandas as pd

from ..models import ContributionTiming, GrowthPoint, SIPParameters, SIPProjectionResult

logger = logging.getLogger(__name__)


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def round_half_up(value: float) -> int:
    """Rounds to the nearest whole unit, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


class SIPProjector:
    """Projects the value of a fixed monthly contribution.

    The closed form feeds the headline figure and the month-by-month
    simulation feeds the chart. The two paths share only ``monthly_rate`` and
    must agree up to the integer rounding of the simulated points.

    Both default to ``ContributionTiming.BEGINNING``, so the chart follows
    ``(v + m) * (1 + r)`` and every point is ``(1 + r)`` times the plain
    end-of-month recurrence ``v * (1 + r) + m``. Pass ``ContributionTiming.END``
    to chart that recurrence instead.
    """

    def project_future_value(self, params: SIPParameters) -> float:
        r = monthly_rate(params.annual_rate_percent)
        n = params.months
        if r == 0:
            return float(params.monthly_amount * n)

        # (1 + r) ** n - 1 without cancellation for small rates
        growth = math.expm1(n * math.log1p(r))
        future_value = params.monthly_amount * growth / r
        if params.timing == ContributionTiming.BEGINNING:
            future_value *= 1 + r
        return future_value

    def generate_growth_series(self, params: SIPParameters) -> List[GrowthPoint]:
        r = monthly_rate(params.annual_rate_percent)
        contribution = params.monthly_amount
        at_beginning = params.timing == ContributionTiming.BEGINNING

        value = 0.0
        points: List[GrowthPoint] = []
        for month in range(1, params.months + 1):
            if at_beginning:
                value = (value + contribution) * (1 + r)
            else:
                value = value * (1 + r) + contribution
            points.append(GrowthPoint(month_index=month, cumulative_value=round_half_up(value)))
        return points

    def summarize(self, params: SIPParameters) -> SIPProjectionResult:
        future_value = round_half_up(self.project_future_value(params))
        result = SIPProjectionResult(
            invested_total=params.invested_total,
            future_value=future_value,
        )
        logger.debug(
            f"SIP {params.monthly_amount}/month at {params.annual_rate_percent}% "
            f"for {params.years}y -> {future_value}"
        )
        return result

    def growth_frame(self, params: SIPParameters) -> pd.DataFrame:
        """Growth series alongside the cumulative amount invested, for charting."""
        points = self.generate_growth_series(params)
        return pd.DataFrame(
            {
                "Month": [point.month_index for point in points],
                "Invested": [params.monthly_amount * point.month_index for point in points],
                "Portfolio Value": [point.cumulative_value for point in points],
            }
        )
