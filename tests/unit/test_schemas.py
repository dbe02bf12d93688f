"""
test_schemas.py
"""
import pytest

from portfolio.data.schemas import DailyRecord, OutputSize, Symbol

from conftest import raw_day


def test_symbol_keeps_value_verbatim():
    assert str(Symbol("brk.B")) == "brk.B"


@pytest.mark.parametrize("value", ["", "   "])
def test_symbol_rejects_empty(value):
    with pytest.raises(ValueError):
        Symbol(value)


def test_symbol_equality_and_hashing():
    assert Symbol("AAPL") == Symbol("AAPL")
    assert Symbol("AAPL") != Symbol("aapl")
    assert len({Symbol("AAPL"), Symbol("AAPL")}) == 1
    assert sorted([Symbol("MSFT"), Symbol("AAPL")]) == [Symbol("AAPL"), Symbol("MSFT")]


def test_record_from_wire_keys():
    record = DailyRecord.model_validate(raw_day(open_="1.5", volume="0"))

    assert record.open == 1.5
    assert record.volume == 0.0
    assert record.adjusted_close == record.close


def test_record_rejects_negative_volume():
    with pytest.raises(ValueError):
        DailyRecord.model_validate(raw_day(volume="-5"))


def test_output_size_values():
    assert OutputSize("compact") is OutputSize.COMPACT
    assert OutputSize.FULL.value == "full"
