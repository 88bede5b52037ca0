"""Domain models for the SIP planner and the fund researcher."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .messages import ServiceMessage

if TYPE_CHECKING:
    from .history import ValuationHistory


class ContributionTiming(str, Enum):
    """When the monthly contribution enters the plan."""

    BEGINNING = "beginning"
    END = "end"


@dataclass(frozen=True)
class SIPParameters:
    """Inputs of a systematic investment plan projection."""

    monthly_amount: float
    annual_rate_percent: float
    years: int
    timing: ContributionTiming = ContributionTiming.BEGINNING

    @property
    def months(self) -> int:
        return int(self.years) * 12

    @property
    def invested_total(self) -> float:
        return self.monthly_amount * self.months

    def validate(self) -> List[ServiceMessage]:
        """Lists the violated preconditions; an empty list means the plan is usable."""
        messages: List[ServiceMessage] = []
        if not self.monthly_amount > 0:
            messages.append(ServiceMessage.error("Monthly investment must be greater than zero."))
        if self.annual_rate_percent < 0:
            messages.append(ServiceMessage.error("Expected return cannot be negative."))
        if int(self.years) != self.years or self.years <= 0:
            messages.append(ServiceMessage.error("Duration must be a whole number of years above zero."))
        return messages


@dataclass(frozen=True)
class SIPProjectionResult:
    """Headline figures of a projection, rounded to whole currency units."""

    invested_total: float
    future_value: float

    @property
    def gain(self) -> float:
        return self.future_value - self.invested_total


@dataclass(frozen=True)
class GrowthPoint:
    month_index: int
    cumulative_value: int


@dataclass(frozen=True)
class ValuationObservation:
    """NAV of an instrument on a given date."""

    date: date
    value: float


class LookbackKind(str, Enum):
    DAYS_BEFORE = "days_before"
    YEAR_TO_DATE = "year_to_date"
    YEARS_BEFORE = "years_before"


class ReturnConvention(str, Enum):
    SIMPLE = "simple"
    ANNUALISED = "annualised"


@dataclass(frozen=True)
class LookbackRule:
    """How far back the reference observation of a period lies."""

    kind: LookbackKind
    count: int = 0

    @classmethod
    def days_before(cls, days: int) -> "LookbackRule":
        return cls(LookbackKind.DAYS_BEFORE, days)

    @classmethod
    def year_to_date(cls) -> "LookbackRule":
        return cls(LookbackKind.YEAR_TO_DATE)

    @classmethod
    def years_before(cls, years: int) -> "LookbackRule":
        return cls(LookbackKind.YEARS_BEFORE, years)


@dataclass(frozen=True)
class PerformancePeriodSpec:
    """One row of the performance table."""

    label: str
    lookback: LookbackRule
    convention: ReturnConvention = ReturnConvention.SIMPLE

    def __post_init__(self) -> None:
        if self.convention == ReturnConvention.ANNUALISED and (
            self.lookback.kind != LookbackKind.YEARS_BEFORE or self.lookback.count < 1
        ):
            raise ValueError(
                f"Annualised period {self.label!r} needs a lookback of one year or more"
            )


@dataclass(frozen=True)
class PeriodReturn:
    label: str
    return_percent: Optional[float]

    @property
    def is_available(self) -> bool:
        return self.return_percent is not None


@dataclass(frozen=True)
class PerformanceReport:
    """Returns of every catalogue period, in catalogue order."""

    entries: Tuple[PeriodReturn, ...] = ()
    anchor_date: Optional[date] = None
    current_value: Optional[float] = None

    def __iter__(self) -> Iterator[PeriodReturn]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def get(self, label: str) -> Optional[float]:
        for entry in self.entries:
            if entry.label == label:
                return entry.return_percent
        raise KeyError(label)

    def as_dict(self) -> dict[str, Optional[float]]:
        return {entry.label: entry.return_percent for entry in self.entries}


@dataclass(frozen=True)
class SchemeSummary:
    """Entry of the instrument catalogue."""

    scheme_code: str
    scheme_name: str


@dataclass(frozen=True)
class SchemeMeta:
    scheme_name: str
    fund_house: str
    scheme_type: Optional[str] = None
    scheme_category: Optional[str] = None
    scheme_code: Optional[str] = None


@dataclass(frozen=True)
class FundDetails:
    """A selected scheme together with its parsed NAV history."""

    meta: SchemeMeta
    history: "ValuationHistory" = field(repr=False)
