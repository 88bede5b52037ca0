"""Shared fixtures: NAV payloads shaped like the mfapi.in responses."""

import pytest

from sipplanner import ValuationHistory


@pytest.fixture
def newest_first_records():
    """Source rows, newest first, as published by the NAV source."""
    return [
        {"date": "14-06-2024", "nav": "120.0"},
        {"date": "07-06-2024", "nav": "118.0"},
        {"date": "15-05-2024", "nav": "115.0"},
        {"date": "15-03-2024", "nav": "110.0"},
        {"date": "02-01-2024", "nav": "106.0"},
        {"date": "15-12-2023", "nav": "105.0"},
        {"date": "14-06-2023", "nav": "100.0"},
        {"date": "14-06-2022", "nav": "90.0"},
        {"date": "14-06-2021", "nav": "75.0"},
    ]


@pytest.fixture
def history(newest_first_records):
    return ValuationHistory.from_records(newest_first_records)


@pytest.fixture
def scheme_payload(newest_first_records):
    return {
        "meta": {
            "fund_house": "Example Mutual Fund",
            "scheme_type": "Open Ended Schemes",
            "scheme_category": "Equity Scheme - Large Cap Fund",
            "scheme_code": 120503,
            "scheme_name": "Example Bluechip Fund - Direct Plan - Growth",
        },
        "data": newest_first_records,
        "status": "SUCCESS",
    }
