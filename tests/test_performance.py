"""
Tests for trailing return analytics.
Hand-verifiable NAV series; anchors always come from the history itself.
"""

from datetime import date

import pytest

from sipplanner import (
    PERFORMANCE_PERIODS,
    LookbackRule,
    MalformedDateError,
    PerformanceAnalyzer,
    PerformancePeriodSpec,
    ReturnConvention,
    ValuationHistory,
    ValuationObservation,
)
from sipplanner.services.performance import annualised_return, resolve_past_date, simple_return

LABELS = ["1 Week", "1 Month", "3 Months", "6 Months", "YTD", "1 Year", "2 Years", "3 Years"]


@pytest.fixture
def analyzer():
    return PerformanceAnalyzer()


class TestCatalogue:
    """Tests for the fixed period catalogue."""

    def test_catalogue_order_and_conventions(self):
        assert [period.label for period in PERFORMANCE_PERIODS] == LABELS
        conventions = [period.convention for period in PERFORMANCE_PERIODS]
        assert conventions == [ReturnConvention.SIMPLE] * 5 + [ReturnConvention.ANNUALISED] * 3

    def test_annualised_requires_year_lookback(self):
        with pytest.raises(ValueError, match="Annualised"):
            PerformancePeriodSpec("bad", LookbackRule.days_before(30), ReturnConvention.ANNUALISED)
        with pytest.raises(ValueError):
            PerformancePeriodSpec("bad", LookbackRule.years_before(0), ReturnConvention.ANNUALISED)


class TestResolvePastDate:
    """Tests for the lookback date arithmetic."""

    def test_days_before(self):
        assert resolve_past_date(LookbackRule.days_before(7), date(2024, 6, 14)) == date(2024, 6, 7)
        assert resolve_past_date(LookbackRule.days_before(90), date(2024, 6, 14)) == date(2024, 3, 16)
        assert resolve_past_date(LookbackRule.days_before(180), date(2024, 6, 14)) == date(2023, 12, 17)

    def test_year_to_date(self):
        assert resolve_past_date(LookbackRule.year_to_date(), date(2024, 6, 15)) == date(2024, 1, 1)

    def test_years_before(self):
        assert resolve_past_date(LookbackRule.years_before(3), date(2024, 6, 14)) == date(2021, 6, 14)

    def test_years_before_from_leap_day(self):
        assert resolve_past_date(LookbackRule.years_before(1), date(2024, 2, 29)) == date(2023, 2, 28)


class TestReturnConventions:
    """Tests for the simple and annualised formulas."""

    def test_simple_return(self):
        assert simple_return(120.0, 100.0) == pytest.approx(20.0)
        assert simple_return(80.0, 100.0) == pytest.approx(-20.0)

    def test_annualised_return(self):
        assert annualised_return(121.0, 100.0, 2) == pytest.approx(10.0)
        assert annualised_return(100.0, 80.0, 1) == pytest.approx(25.0)

    def test_zero_reference_is_undefined(self):
        assert simple_return(100.0, 0.0) is None
        assert annualised_return(100.0, 0.0, 3) is None

    def test_negative_ratio_cannot_be_annualised(self):
        assert annualised_return(-5.0, 100.0, 2) is None

    def test_annualised_needs_positive_years(self):
        with pytest.raises(ValueError):
            annualised_return(100.0, 80.0, 0)


class TestComputeAll:
    """Tests for the full performance table."""

    def test_full_table(self, analyzer, history):
        report = analyzer.compute_all(history)

        assert report.anchor_date == date(2024, 6, 14)
        assert report.current_value == 120.0
        assert [entry.label for entry in report] == LABELS

        expected = {
            "1 Week": (120 / 118 - 1) * 100,
            "1 Month": (120 / 115 - 1) * 100,
            "3 Months": (120 / 110 - 1) * 100,
            "6 Months": (120 / 105 - 1) * 100,
            # 01-01-2024 resolves to the 15-12-2023 observation
            "YTD": (120 / 105 - 1) * 100,
            "1 Year": 20.0,
            "2 Years": ((120 / 90) ** (1 / 2) - 1) * 100,
            "3 Years": ((120 / 75) ** (1 / 3) - 1) * 100,
        }
        for label, value in expected.items():
            assert report.get(label) == pytest.approx(value), label

    def test_one_year_reference_example(self, analyzer):
        report = analyzer.compute_from_records(
            [{"date": "01-01-2024", "nav": "100"}, {"date": "01-01-2023", "nav": "80"}]
        )
        assert report.get("1 Year") == pytest.approx(25.0)
        assert round(report.get("1 Year"), 2) == 25.00
        assert report.get("2 Years") is None

    def test_ytd_reference_example(self, analyzer):
        report = analyzer.compute_from_records(
            [{"date": "15-06-2024", "nav": "108"}, {"date": "01-01-2024", "nav": "90"}]
        )
        assert report.get("YTD") == pytest.approx(20.0)

    def test_empty_history(self, analyzer):
        report = analyzer.compute_all(ValuationHistory())
        assert report.is_empty
        assert len(report) == 0
        assert report.anchor_date is None

    @pytest.mark.parametrize("day", ["15-06-2024", "01-01-2024"])
    def test_single_observation_is_all_absent(self, analyzer, day):
        report = analyzer.compute_from_records([{"date": day, "nav": "100"}])
        assert len(report) == len(PERFORMANCE_PERIODS)
        assert all(entry.return_percent is None for entry in report)
        assert not any(entry.is_available for entry in report)

    def test_young_instrument_has_absent_long_periods(self, analyzer):
        report = analyzer.compute_from_records(
            [
                {"date": "14-06-2024", "nav": "12.0"},
                {"date": "01-03-2024", "nav": "10.0"},
            ]
        )
        assert report.get("3 Months") == pytest.approx(20.0)
        assert report.get("6 Months") is None
        assert report.get("1 Year") is None
        assert report.get("3 Years") is None

    def test_zero_reference_only_affects_its_period(self, analyzer):
        report = analyzer.compute_all(
            [
                ValuationObservation(date(2024, 6, 14), 120.0),
                ValuationObservation(date(2024, 6, 7), 0.0),
                ValuationObservation(date(2023, 6, 14), 100.0),
            ]
        )
        assert report.get("1 Week") is None
        assert report.get("1 Month") == pytest.approx(20.0)
        assert report.get("1 Year") == pytest.approx(20.0)

    def test_ordering_does_not_change_result(self, analyzer, newest_first_records):
        newest_first = analyzer.compute_from_records(newest_first_records)
        oldest_first = analyzer.compute_from_records(list(reversed(newest_first_records)))
        assert newest_first == oldest_first

    def test_anchored_on_latest_observation_not_today(self, analyzer):
        report = analyzer.compute_from_records(
            [{"date": "31-12-2015", "nav": "150"}, {"date": "31-12-2014", "nav": "100"}]
        )
        assert report.anchor_date == date(2015, 12, 31)
        assert report.get("1 Year") == pytest.approx(50.0)

    def test_malformed_date_aborts_computation(self, analyzer, newest_first_records):
        records = newest_first_records[:3] + [{"date": "31-02-2024", "nav": "1"}] + newest_first_records[3:]
        with pytest.raises(MalformedDateError):
            analyzer.compute_from_records(records)

    def test_trailing_newline_in_latest_date_aborts_computation(self, analyzer):
        with pytest.raises(MalformedDateError):
            analyzer.compute_from_records(
                [{"date": "01-01-2024\n", "nav": "100"}, {"date": "01-01-2023", "nav": "80"}]
            )

    def test_custom_catalogue(self, history):
        analyzer = PerformanceAnalyzer(periods=[PerformancePeriodSpec("10 Days", LookbackRule.days_before(10))])
        report = analyzer.compute_all(history)
        assert report.as_dict() == {"10 Days": pytest.approx((120 / 115 - 1) * 100)}

    def test_unknown_label(self, analyzer, history):
        with pytest.raises(KeyError):
            analyzer.compute_all(history).get("5 Years")
