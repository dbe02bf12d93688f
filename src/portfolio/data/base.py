"""
Abstract base class for daily quote providers.

Concrete adapters implement ``fetch_daily_series``.  The base class
also owns ``parse_payload``, which turns a decoded JSON body into a
validated ``TimeSeries`` so that no unchecked upstream data ever
reaches the aggregator.
"""
from abc import ABC, abstractmethod
from typing import Any

from loguru import logger
from pydantic import ValidationError

from portfolio.data.schemas import (
    OutputSize,
    Symbol,
    TimeSeries,
    TimeSeriesDailyResponse,
)
from portfolio.exceptions import ParseError

# In-band diagnostics the upstream returns with an HTTP 200.
_UPSTREAM_DIAGNOSTIC_KEYS = ("Error Message", "Note", "Information")


class QuoteProvider(ABC):
    """Contract that all daily quote adapters must satisfy."""

    @abstractmethod
    def fetch_daily_series(
        self,
        symbol: Symbol,
        output_size: OutputSize = OutputSize.COMPACT,
    ) -> TimeSeries:
        """Fetch the daily adjusted time series for one symbol.

        Args:
            symbol: Ticker to query.
            output_size: ``COMPACT`` for roughly the last 100 trading days,
                ``FULL`` for the entire available history.

        Returns:
            Mapping of trading date to ``DailyRecord``.

        Raises:
            TransportError: On network failure or a non-2xx status.
            ParseError: If the body cannot be decoded into a series.
        """

    def parse_payload(self, payload: Any, symbol: Symbol) -> TimeSeries:
        """Validate a decoded JSON body and return its time series.

        Every record must parse; a single bad field rejects the whole
        payload.

        Raises:
            ParseError: If the payload is not an object, lacks the
                time-series field, or contains an invalid record.
        """
        if not isinstance(payload, dict):
            raise ParseError(
                f"Expected a JSON object for {symbol}, "
                f"got {type(payload).__name__}"
            )

        try:
            response = TimeSeriesDailyResponse.model_validate(payload)
        except ValidationError as e:
            for key in _UPSTREAM_DIAGNOSTIC_KEYS:
                if key in payload:
                    logger.error(f"Upstream rejected request for {symbol}: {payload[key]}")
                    raise ParseError(
                        f"No time series for {symbol}. Upstream said: {payload[key]}"
                    ) from e

            logger.error(f"Schema violation in daily series for {symbol}")
            logger.debug(str(e))
            first = e.errors()[0]
            location = " -> ".join(str(part) for part in first["loc"])
            raise ParseError(
                f"Malformed daily series for {symbol}: "
                f"{e.error_count()} invalid field(s), first at '{location}' "
                f"({first['msg']})"
            ) from e

        return response.time_series
