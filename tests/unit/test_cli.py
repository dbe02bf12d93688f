"""
test_cli.py
"""
import json

import pytest

from portfolio.cli import main
from portfolio.core.engine import EquityEngine
from portfolio.data.adapters.alpha_vantage_adapter import AlphaVantageAdapter
from portfolio.exceptions import ConfigurationError

from conftest import FakeResponse, FakeSession


@pytest.fixture
def engine_factory(settings, daily_payload):
    def factory():
        session = FakeSession(FakeResponse(daily_payload))
        return EquityEngine(AlphaVantageAdapter(settings, session=session))
    return factory


def test_latest_price_prints_symbol_and_price(engine_factory, capsys):
    status = main(["latest-price", "IBM"], engine_factory=engine_factory)

    assert status == 0
    assert capsys.readouterr().out.strip() == "IBM: 120.0"


def test_latest_price_json(engine_factory, capsys):
    main(["latest-price", "IBM", "--json"], engine_factory=engine_factory)

    assert json.loads(capsys.readouterr().out) == {"symbol": "IBM", "price": 120.0}


def test_summary_all_time_json(engine_factory, capsys):
    status = main(["summary", "IBM", "--period", "all", "--json"], engine_factory=engine_factory)

    assert status == 0
    assert json.loads(capsys.readouterr().out) == {
        "latest_price": 120.0,
        "earliest_price": 100.0,
        "max_price": 125.0,
        "min_price": 90.0,
    }


def test_summary_text(engine_factory, capsys):
    main(["summary", "IBM", "--period", "all"], engine_factory=engine_factory)

    out = capsys.readouterr().out
    assert out.startswith("IBM (all)")
    assert "max:      125.0" in out


def test_summary_default_period_with_stale_data_fails(engine_factory, capsys):
    # Fixture data is from early 2024, outside the default one-year window.
    status = main(["summary", "IBM"], engine_factory=engine_factory)

    assert status == 1
    assert "No data in range" in capsys.readouterr().err


def test_history_table(engine_factory, capsys):
    status = main(["history", "IBM", "--period", "all"], engine_factory=engine_factory)

    out = capsys.readouterr().out
    assert status == 0
    assert "close_price" in out
    assert out.index("2024-01-01") < out.index("2024-01-10")


def test_history_empty_window_message(engine_factory, capsys):
    status = main(["history", "IBM", "--period", "month"], engine_factory=engine_factory)

    assert status == 0
    assert "No trading days for IBM" in capsys.readouterr().out


def test_transport_error_exits_non_zero(settings, capsys):
    def factory():
        session = FakeSession(FakeResponse({}, status_code=500))
        return EquityEngine(AlphaVantageAdapter(settings, session=session))

    status = main(["latest-price", "IBM"], engine_factory=factory)

    assert status == 1
    assert "HTTP 500" in capsys.readouterr().err


def test_missing_api_key_exits_non_zero(monkeypatch, capsys):
    monkeypatch.delenv("VANTAGE_API_KEY", raising=False)
    monkeypatch.setattr("portfolio.cli.load_dotenv", lambda: False)

    status = main(["latest-price", "IBM"])

    assert status == 1
    assert "VANTAGE_API_KEY" in capsys.readouterr().err


def test_configuration_error_raised_before_fetch(capsys):
    def factory():
        raise ConfigurationError("`VANTAGE_API_KEY` environment variable must be set")

    assert main(["summary", "IBM"], engine_factory=factory) == 1


@pytest.mark.parametrize("argv", [["bogus", "IBM"], [], ["latest-price"], ["latest-price", ""]])
def test_bad_invocation_exits_with_usage_error(argv, engine_factory):
    with pytest.raises(SystemExit) as excinfo:
        main(argv, engine_factory=engine_factory)

    assert excinfo.value.code == 2
