"""
Equity lookup engine.

Composes a ``QuoteProvider`` with the aggregator:

  1. Fetch the daily series (compact for a latest price, full for a
     summary so that ``ALL_TIME`` really covers all history).
  2. Reduce it to the requested statistic.

The series is fetched fresh on every call; nothing is cached.
"""
from datetime import date
from typing import Optional, Union

from loguru import logger

from portfolio.core.aggregator import filter_by_period, latest_close, summarize
from portfolio.core.types import EquitySummary, TimePeriod
from portfolio.data.base import QuoteProvider
from portfolio.data.schemas import OutputSize, Symbol, TimeSeries

SymbolLike = Union[Symbol, str]


def _as_symbol(symbol: SymbolLike) -> Symbol:
    return symbol if isinstance(symbol, Symbol) else Symbol(symbol)


class EquityEngine:
    """Fetch-then-aggregate operations for a single equity."""

    def __init__(self, provider: QuoteProvider):
        """
        Args:
            provider: Source of daily time series.
        """
        self.provider = provider

    def get_latest_price(self, symbol: SymbolLike) -> float:
        """Most recent close for *symbol*.

        Raises:
            EmptyResultError: If the provider returned no trading days.
        """
        symbol = _as_symbol(symbol)
        series = self.provider.fetch_daily_series(symbol, OutputSize.COMPACT)
        price = latest_close(series)
        logger.info(f"Latest close for {symbol}: {price}")
        return price

    def summary(
        self,
        symbol: SymbolLike,
        period: TimePeriod = TimePeriod.YEAR,
        today: Optional[date] = None,
    ) -> EquitySummary:
        """Summary statistics for *symbol* over *period*."""
        symbol = _as_symbol(symbol)
        series = self.provider.fetch_daily_series(symbol, OutputSize.FULL)
        result = summarize(series, period, today=today)
        logger.info(f"Summary for {symbol} ({TimePeriod(period).value}): {result}")
        return result

    def history(
        self,
        symbol: SymbolLike,
        period: TimePeriod = TimePeriod.MONTH,
        output_size: OutputSize = OutputSize.COMPACT,
        today: Optional[date] = None,
    ) -> TimeSeries:
        """Raw daily records for *symbol* inside *period*."""
        symbol = _as_symbol(symbol)
        series = self.provider.fetch_daily_series(symbol, output_size)
        return filter_by_period(series, period, today=today)
