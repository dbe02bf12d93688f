"""
Alpha Vantage daily quote adapter.

Issues a single GET against the TIME_SERIES_DAILY_ADJUSTED function and
hands the decoded body to ``QuoteProvider.parse_payload``.  One request
per call: no retry, no backoff, and no timeout beyond the one carried
in the injected settings (``None`` keeps the ``requests`` default).
"""
from typing import Optional

import requests
from loguru import logger

from portfolio.config import VantageSettings
from portfolio.data.base import QuoteProvider
from portfolio.data.schemas import OutputSize, Symbol, TimeSeries
from portfolio.exceptions import ParseError, TransportError

DAILY_ADJUSTED_FUNCTION = "TIME_SERIES_DAILY_ADJUSTED"


class AlphaVantageAdapter(QuoteProvider):
    """Concrete QuoteProvider backed by the Alpha Vantage REST API."""

    def __init__(
        self,
        settings: VantageSettings,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            settings: Endpoint, API key and optional timeout.
            session: HTTP session to reuse across calls.  Anything with a
                     compatible ``get`` method may be substituted in tests.
        """
        self.settings = settings
        self.session = session or requests.Session()

    def fetch_daily_series(
        self,
        symbol: Symbol,
        output_size: OutputSize = OutputSize.COMPACT,
    ) -> TimeSeries:
        output_size = OutputSize(output_size)
        logger.info(f"Fetching daily series for {symbol} | outputsize={output_size.value}")

        params = {
            "function": DAILY_ADJUSTED_FUNCTION,
            "symbol": str(symbol),
            "apikey": self.settings.api_key,
            "outputsize": output_size.value,
        }

        try:
            response = self.session.get(
                self.settings.base_url,
                params=params,
                timeout=self.settings.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"Quotes endpoint returned HTTP {status} for {symbol}")
            raise TransportError(
                f"HTTP {status} while fetching {symbol}", status_code=status
            ) from e
        except requests.RequestException as e:
            logger.error(f"Request for {symbol} failed: {e}")
            raise TransportError(f"Request for {symbol} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Response for {symbol} is not valid JSON")
            raise ParseError(f"Response for {symbol} is not valid JSON") from e

        series = self.parse_payload(payload, symbol)
        logger.success(f"Parsed {len(series)} trading days for {symbol}.")
        return series
