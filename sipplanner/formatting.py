"""Display helpers shared by the Streamlit pages."""
from __future__ import annotations

from typing import Optional

import pandas as pd

from .models import PerformanceReport

CURRENCY_SYMBOL = "₹"
RETURN_PLACEHOLDER = "—"


def format_indian_number(value: float, decimals: int = 0) -> str:
    """Groups digits the Indian way: 1234567 -> ``12,34,567``."""
    sign = "-" if round(value, decimals) < 0 else ""
    integer, _, fraction = f"{abs(value):.{decimals}f}".partition(".")

    if len(integer) > 3:
        head, tail = integer[:-3], integer[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        integer = ",".join(groups + [tail])

    return f"{sign}{integer}.{fraction}" if fraction else f"{sign}{integer}"


def format_inr(value: float, decimals: int = 0) -> str:
    return f"{CURRENCY_SYMBOL} {format_indian_number(value, decimals)}"


def format_lakhs(value: float) -> str:
    """Axis tick label in lakhs (1 lakh = 100,000)."""
    return f"{CURRENCY_SYMBOL}{value / 100000:.1f}L"


def _displayed_percent(percent: float) -> float:
    # adding 0.0 turns -0.0 into 0.0
    return round(percent, 2) + 0.0


def return_direction(percent: Optional[float]) -> str:
    if percent is None:
        return "neutral"
    return "up" if _displayed_percent(percent) >= 0 else "down"


def format_return(percent: Optional[float]) -> str:
    if percent is None:
        return RETURN_PLACEHOLDER
    shown = _displayed_percent(percent)
    arrow = "▲" if shown >= 0 else "▼"
    return f"{arrow} {shown:.2f}%"


def performance_frame(report: PerformanceReport) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Period": [entry.label for entry in report],
            "Return": [format_return(entry.return_percent) for entry in report],
            "Direction": [return_direction(entry.return_percent) for entry in report],
        }
    )
