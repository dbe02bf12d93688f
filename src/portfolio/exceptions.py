"""
Error taxonomy for the quote pipeline.

Every failure the fetch / parse / aggregate path can produce is raised
as a subclass of ``PortfolioError`` so that the command-line layer can
report it with a single ``except`` clause.  Nothing here is recovered
internally: there is no retry and no fallback provider.
"""
from typing import Optional


class PortfolioError(Exception):
    """Base class for all errors raised by the ``portfolio`` package."""


class ConfigurationError(PortfolioError):
    """A required setting (e.g. the API key) is missing or malformed."""


class TransportError(PortfolioError):
    """Network failure or non-2xx HTTP status from the quotes endpoint."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(PortfolioError):
    """Response body could not be decoded into a time series."""


class EmptyResultError(PortfolioError):
    """No data points were left to aggregate."""


class NonOrderableValueError(PortfolioError):
    """A price could not be ordered against another (e.g. NaN)."""
