"""
Runtime configuration for the Alpha Vantage client.

Settings are read from the process environment exactly once, when
``VantageSettings.from_env()`` is called, and the resulting immutable
object is handed to the adapter.  Missing credentials fail here, before
any HTTP session is created.

Recognised variables::

    VANTAGE_API_KEY   (required) upstream API key
    VANTAGE_BASE_URL  (optional) query endpoint override
    VANTAGE_TIMEOUT   (optional) request timeout in seconds
"""
import os
from typing import Mapping, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from portfolio.exceptions import ConfigurationError

API_KEY_ENV = "VANTAGE_API_KEY"
BASE_URL_ENV = "VANTAGE_BASE_URL"
TIMEOUT_ENV = "VANTAGE_TIMEOUT"

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"


class VantageSettings(BaseModel):
    """Connection settings for the quotes endpoint."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, repr=False)
    base_url: str = Field(DEFAULT_BASE_URL, description="Query endpoint")
    # None leaves the HTTP client's default behaviour untouched.
    timeout: Optional[float] = Field(None, gt=0, description="Seconds")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VantageSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from.  Defaults to ``os.environ``.

        Raises:
            ConfigurationError: If the API key is missing/blank or the
                timeout is not a positive number.
        """
        env = os.environ if environ is None else environ

        api_key = (env.get(API_KEY_ENV) or "").strip()
        if not api_key:
            logger.critical(f"`{API_KEY_ENV}` environment variable is not set.")
            raise ConfigurationError(
                f"`{API_KEY_ENV}` environment variable must be set"
            )

        base_url = (env.get(BASE_URL_ENV) or "").strip() or DEFAULT_BASE_URL

        timeout = None
        raw_timeout = (env.get(TIMEOUT_ENV) or "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"`{TIMEOUT_ENV}` must be a number of seconds, got {raw_timeout!r}"
                ) from e
            if not timeout > 0:
                raise ConfigurationError(
                    f"`{TIMEOUT_ENV}` must be positive, got {raw_timeout!r}"
                )

        logger.debug(f"Loaded settings: endpoint={base_url} timeout={timeout}")
        return cls(api_key=api_key, base_url=base_url, timeout=timeout)
