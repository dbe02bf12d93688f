"""
Wire contracts for the Alpha Vantage daily-adjusted endpoint.

The upstream format encodes every numeric field as a JSON *string*
(``"6. volume": "12345"``) under numbered keys.  The pydantic models
below map those keys onto plain attribute names and coerce the strings
to floats, so a record either parses completely or not at all.

OHLC consistency (high >= low, etc.) is deliberately not validated:
upstream does not guarantee it and such rows are treated as unusual but
valid data.
"""
from datetime import date
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


class Symbol(RootModel[str]):
    """Non-empty ticker identifier, passed verbatim to the upstream query.

    No case or exchange-suffix normalisation is applied.
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(..., min_length=1)

    @field_validator("root")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Symbol must not be blank")
        return v

    def __str__(self) -> str:
        return self.root

    def __lt__(self, other: "Symbol") -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.root < other.root


class OutputSize(str, Enum):
    """Upstream history-length hint."""

    COMPACT = "compact"  # ~100 most recent trading days
    FULL = "full"


class DailyRecord(BaseModel):
    """One trading day of adjusted OHLCV data for one symbol."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    open: float = Field(..., alias="1. open")
    high: float = Field(..., alias="2. high")
    low: float = Field(..., alias="3. low")
    close: float = Field(..., alias="4. close")
    adjusted_close: float = Field(..., alias="5. adjusted close")

    # Sent as a numeric string; parsed to a number, never kept as text.
    volume: float = Field(..., ge=0, alias="6. volume")
    dividend_amount: float = Field(..., ge=0, alias="7. dividend amount")
    split_coefficient: float = Field(..., gt=0, alias="8. split coefficient")


# Calendar date -> record.  Missing dates mean the market was closed.
TimeSeries = Dict[date, DailyRecord]


class TimeSeriesDailyResponse(BaseModel):
    """Top-level body of a TIME_SERIES_DAILY_ADJUSTED response."""

    model_config = ConfigDict(populate_by_name=True)

    meta_data: Dict[str, Any] = Field(default_factory=dict, alias="Meta Data")
    time_series: Dict[date, DailyRecord] = Field(..., alias="Time Series (Daily)")
