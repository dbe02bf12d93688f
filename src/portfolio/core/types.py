"""
Data contracts for period selection and summary results.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TimePeriod(str, Enum):
    """Date window applied before aggregation, anchored to today."""

    MONTH = "month"
    YEAR = "year"
    ALL_TIME = "all"

    @property
    def window_days(self) -> Optional[int]:
        """Window length in days, or ``None`` for no filtering."""
        return _WINDOW_DAYS[self]


_WINDOW_DAYS = {
    TimePeriod.MONTH: 30,
    TimePeriod.YEAR: 365,
    TimePeriod.ALL_TIME: None,
}


class EquitySummary(BaseModel):
    """Price statistics over one filtered window.  Immutable."""

    model_config = ConfigDict(frozen=True)

    latest_price: float = Field(..., description="Close on the most recent date")
    earliest_price: float = Field(..., description="Close on the oldest date")
    max_price: float = Field(..., description="Highest intraday high")
    min_price: float = Field(..., description="Lowest intraday low")
