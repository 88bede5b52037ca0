"""SIP planning and mutual fund research package."""

from .config import PERFORMANCE_PERIODS
from .dates import closest_observation_at_or_before, parse_date
from .errors import (
    DuplicateObservationError,
    HistoryError,
    MalformedDateError,
    MalformedValueError,
    SIPPlannerError,
)
from .history import ValuationHistory, parse_nav
from .messages import MessageLevel, ServiceMessage
from .models import (
    ContributionTiming,
    FundDetails,
    GrowthPoint,
    LookbackKind,
    LookbackRule,
    PerformancePeriodSpec,
    PerformanceReport,
    PeriodReturn,
    ReturnConvention,
    SchemeMeta,
    SchemeSummary,
    SIPParameters,
    SIPProjectionResult,
    ValuationObservation,
)
from .services import (
    CatalogueResult,
    FundCatalogueService,
    FundDetailsResult,
    FundHistoryService,
    PerformanceAnalyzer,
    SIPProjector,
)

__all__ = [
    "CatalogueResult",
    "ContributionTiming",
    "DuplicateObservationError",
    "FundCatalogueService",
    "FundDetails",
    "FundDetailsResult",
    "FundHistoryService",
    "GrowthPoint",
    "HistoryError",
    "LookbackKind",
    "LookbackRule",
    "MalformedDateError",
    "MalformedValueError",
    "MessageLevel",
    "PERFORMANCE_PERIODS",
    "PerformanceAnalyzer",
    "PerformancePeriodSpec",
    "PerformanceReport",
    "PeriodReturn",
    "ReturnConvention",
    "SchemeMeta",
    "SchemeSummary",
    "ServiceMessage",
    "SIPParameters",
    "SIPPlannerError",
    "SIPProjectionResult",
    "SIPProjector",
    "ValuationHistory",
    "ValuationObservation",
    "closest_observation_at_or_before",
    "parse_date",
    "parse_nav",
]
