"""Static configuration for the planner and the fund researcher."""
from __future__ import annotations

import os

from dotenv import load_dotenv

from .models import LookbackRule, PerformancePeriodSpec, ReturnConvention

load_dotenv()

DATE_FORMAT = "%d-%m-%Y"

PERFORMANCE_PERIODS = (
    PerformancePeriodSpec("1 Week", LookbackRule.days_before(7)),
    PerformancePeriodSpec("1 Month", LookbackRule.days_before(30)),
    PerformancePeriodSpec("3 Months", LookbackRule.days_before(90)),
    PerformancePeriodSpec("6 Months", LookbackRule.days_before(180)),
    PerformancePeriodSpec("YTD", LookbackRule.year_to_date()),
    PerformancePeriodSpec("1 Year", LookbackRule.years_before(1), ReturnConvention.ANNUALISED),
    PerformancePeriodSpec("2 Years", LookbackRule.years_before(2), ReturnConvention.ANNUALISED),
    PerformancePeriodSpec("3 Years", LookbackRule.years_before(3), ReturnConvention.ANNUALISED),
)

# SIP calculator defaults
DEFAULT_MONTHLY_AMOUNT = 10000
DEFAULT_ANNUAL_RATE_PERCENT = 12.0
DEFAULT_YEARS = 10

# Fund researcher
SEARCH_MIN_CHARS = 3
SEARCH_MAX_RESULTS = 10
NAV_CHART_POINTS = 180

MFAPI_BASE_URL = os.getenv("MFAPI_BASE_URL", "https://api.mfapi.in").rstrip("/")
MFAPI_TIMEOUT_S = float(os.getenv("MFAPI_TIMEOUT_S", "10"))
LOG_LEVEL = os.getenv("SIPPLANNER_LOG_LEVEL", "INFO").upper()
