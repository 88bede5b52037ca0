from __future__ import annotations

from datetime import date
from typing import Sequence

import plotly.express as px
import streamlit as st

from sipplanner import (
    FundCatalogueService,
    FundHistoryService,
    MessageLevel,
    PerformanceAnalyzer,
    SchemeSummary,
    ServiceMessage,
    SIPParameters,
    SIPProjector,
)
from sipplanner.config import (
    DEFAULT_ANNUAL_RATE_PERCENT,
    DEFAULT_MONTHLY_AMOUNT,
    DEFAULT_YEARS,
    NAV_CHART_POINTS,
)
from sipplanner.dates import format_date
from sipplanner.formatting import format_inr, format_lakhs, performance_frame
from sipplanner.logging_utils import configure_logging
from sipplanner.services.funds import CatalogueResult, FundDetailsResult


# ------------------ Page config ------------------ #
configure_logging()
st.set_page_config(page_title="Matecap Wealth", layout="centered")


# ------------------ Helpers ------------------ #
def _theme_is_dark(force: bool | None = None) -> bool:
    if force is not None:
        return force

    base = st.get_option("theme.base")
    if isinstance(base, str):
        return base.lower() == "dark"
    return False


def _display_messages(messages: Sequence[ServiceMessage]) -> None:
    for message in messages:
        if message.level == MessageLevel.ERROR:
            st.error(message.text)
        elif message.level == MessageLevel.WARNING:
            st.warning(message.text)
        else:
            st.info(message.text)


@st.cache_data(ttl=6 * 60 * 60, show_spinner="Loading funds...")
def _load_catalogue() -> CatalogueResult:
    return FundCatalogueService().load_catalogue()


@st.cache_data(ttl=60 * 60, show_spinner="Loading fund details...")
def _load_fund(scheme_code: str) -> FundDetailsResult:
    return FundHistoryService().load_details(scheme_code)


def _select_fund(scheme: SchemeSummary) -> None:
    st.session_state["selected_code"] = scheme.scheme_code
    st.session_state["fund_search"] = scheme.scheme_name


def _clear_fund() -> None:
    st.session_state["selected_code"] = None
    st.session_state["fund_search"] = ""


# ------------------ Sections ------------------ #
def sip_section(template: str) -> None:
    st.header("SIP Calculator")
    st.caption(
        "Estimate how your monthly investments can grow over time with "
        "disciplined SIP investing."
    )

    col_amt, col_rate, col_years = st.columns(3)
    monthly = col_amt.number_input(
        "Monthly Investment (₹)", min_value=0, value=DEFAULT_MONTHLY_AMOUNT, step=500
    )
    rate = col_rate.number_input(
        "Expected Return (% p.a.)", min_value=0.0, value=DEFAULT_ANNUAL_RATE_PERCENT, step=0.5
    )
    years = col_years.number_input(
        "Investment Duration (Years)", min_value=0, value=DEFAULT_YEARS, step=1
    )

    params = SIPParameters(monthly_amount=float(monthly), annual_rate_percent=float(rate), years=int(years))
    problems = params.validate()
    if problems:
        _display_messages(problems)
        return

    projector = SIPProjector()
    result = projector.summarize(params)

    col1, col2, col3 = st.columns(3)
    col1.metric("Invested Amount", format_inr(result.invested_total))
    col2.metric("Estimated Value", format_inr(result.future_value))
    col3.metric("Wealth Gained", format_inr(result.gain))

    df_growth = projector.growth_frame(params)
    fig = px.line(
        df_growth,
        x="Month",
        y=["Portfolio Value", "Invested"],
        title="SIP Growth",
        template=template,
    )
    max_value = float(df_growth["Portfolio Value"].max())
    ticks = [max_value * step / 4 for step in range(5)]
    fig.update_layout(
        xaxis_title="Month",
        yaxis_title="",
        yaxis=dict(tickvals=ticks, ticktext=[format_lakhs(v) for v in ticks]),
        hovermode="x unified",
        legend_title_text="",
    )
    st.plotly_chart(fig, use_container_width=True)


def fund_section(template: str) -> None:
    st.header("Fund Researcher")

    st.session_state.setdefault("selected_code", None)
    st.session_state.setdefault("fund_search", "")

    catalogue = _load_catalogue()
    _display_messages(catalogue.messages)

    selected_code = st.session_state["selected_code"]
    query = st.text_input(
        "Search funds",
        key="fund_search",
        placeholder="Search ICICI Prudential, HDFC, SBI...",
        disabled=selected_code is not None,
    )

    if selected_code is None:
        for scheme in FundCatalogueService.search(catalogue.schemes, query):
            st.button(
                scheme.scheme_name,
                key=f"fund-{scheme.scheme_code}",
                on_click=_select_fund,
                args=(scheme,),
            )
        return

    st.button("Change Fund", on_click=_clear_fund)

    fund_result = _load_fund(selected_code)
    _display_messages(fund_result.messages)
    details = fund_result.details
    if details is None or not details.history:
        return

    latest = details.history.latest
    st.subheader(details.meta.scheme_name)
    st.caption(details.meta.fund_house)

    col_nav, col_date = st.columns(2)
    col_nav.metric("Latest NAV", format_inr(latest.value, decimals=4))
    col_date.metric("NAV Date", format_date(latest.date))

    serie = details.history.tail(NAV_CHART_POINTS).to_series()
    df_nav = serie.rename("NAV").rename_axis("Date").reset_index()
    fig_nav = px.line(df_nav, x="Date", y="NAV", template=template)
    fig_nav.update_traces(hovertemplate="<b>%{x|%d-%m-%Y}</b><br>NAV: ₹%{y:.4f}<extra></extra>")
    fig_nav.update_layout(xaxis_title="", yaxis_title="NAV (₹)", showlegend=False)
    st.plotly_chart(fig_nav, use_container_width=True)

    report = PerformanceAnalyzer().compute_all(details.history)
    st.markdown(f"**Trailing returns as of {format_date(report.anchor_date)}**")
    df_perf = performance_frame(report)
    colors = {"up": "color: #16a34a", "down": "color: #dc2626", "neutral": "color: #94a3b8"}
    styled = df_perf[["Period", "Return"]].style.apply(
        lambda row: [colors[df_perf.at[row.name, "Direction"]]] * len(row), axis=1
    )
    st.dataframe(styled, use_container_width=True, hide_index=True)
    st.caption("Up to 6 months and YTD: absolute return. 1 year and above: annualised.")


def contact_section() -> None:
    st.header("Get in Touch")
    st.caption("Have a query or want investment guidance? We'll get back to you.")
    with st.form("contact", clear_on_submit=True):
        name = st.text_input("Your Name")
        email = st.text_input("Your Email")
        body = st.text_area("Your Message", height=120)
        submitted = st.form_submit_button("Send Query")
    if submitted:
        if not (name.strip() and email.strip() and body.strip()):
            st.warning("Please fill in your name, e-mail and message.")
        else:
            st.success(f"Thanks {name.strip()}, your query has been noted.")


def main() -> None:
    # ------------------ Sidebar ------------------ #
    force_dark = st.sidebar.toggle("Dark charts", value=False)
    template = "plotly_dark" if _theme_is_dark(force=True if force_dark else None) else "plotly_white"

    st.title("Build Wealth with Discipline & Clarity")
    st.markdown(
        "Matecap Wealth helps you make informed investment decisions with "
        "transparent SIP planning and real-time mutual fund research."
    )

    sip_section(template)
    st.divider()
    fund_section(template)
    st.divider()
    contact_section()

    st.caption(f"© {date.today().year} Matecap Wealth | contact@matecapwealth.com")


if __name__ == "__main__":
    main()
