"""Service layer of the planner: projections, analytics and data retrieval."""
from .funds import CatalogueResult, FundCatalogueService, FundDetailsResult, FundHistoryService
from .performance import PerformanceAnalyzer, annualised_return, resolve_past_date, simple_return
from .sip import SIPProjector, monthly_rate, round_half_up

__all__ = [
    "CatalogueResult",
    "FundCatalogueService",
    "FundDetailsResult",
    "FundHistoryService",
    "PerformanceAnalyzer",
    "SIPProjector",
    "annualised_return",
    "monthly_rate",
    "resolve_past_date",
    "round_half_up",
    "simple_return",
]
