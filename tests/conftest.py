"""Shared fixtures: canned upstream payloads and a fake HTTP session."""
from datetime import date

import pytest
import requests
from loguru import logger

from portfolio.config import VantageSettings
from portfolio.data.schemas import DailyRecord


def raw_day(open_="100.0", high="110.0", low="90.0", close="105.0", volume="12345"):
    return {
        "1. open": open_,
        "2. high": high,
        "3. low": low,
        "4. close": close,
        "5. adjusted close": close,
        "6. volume": volume,
        "7. dividend amount": "0.0000",
        "8. split coefficient": "1.0",
    }


def make_record(close: float, high: float, low: float) -> DailyRecord:
    return DailyRecord(
        open=close,
        high=high,
        low=low,
        close=close,
        adjusted_close=close,
        volume=1000.0,
        dividend_amount=0.0,
        split_coefficient=1.0,
    )


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if not 200 <= self.status_code < 300:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.text is not None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Stands in for ``requests.Session``; records every ``get`` call."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings():
    return VantageSettings(api_key="demo-key", base_url="https://example.test/query")


@pytest.fixture
def daily_payload():
    return {
        "Meta Data": {
            "1. Information": "Daily Time Series with Splits and Dividend Events",
            "2. Symbol": "IBM",
        },
        "Time Series (Daily)": {
            "2024-01-10": raw_day(close="120.0", high="125.0", low="95.0"),
            "2024-01-01": raw_day(close="100.0", high="110.0", low="90.0"),
        },
    }


@pytest.fixture
def sample_series():
    return {
        date(2024, 1, 1): make_record(close=100.0, high=110.0, low=90.0),
        date(2024, 1, 10): make_record(close=120.0, high=125.0, low=95.0),
    }


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks the CLI installs on captured streams."""
    yield
    logger.remove()
