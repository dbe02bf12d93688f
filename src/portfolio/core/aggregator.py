"""
Date-filtered aggregation over a daily time series.

All functions here are pure: given the same series, period and ``today``
anchor they return the same result.  Reductions never assume a
non-empty input and never order NaN silently:

  - an empty input raises ``EmptyResultError``;
  - a value that cannot be ordered raises ``NonOrderableValueError``.
"""
import math
from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from loguru import logger

from portfolio.core.types import EquitySummary, TimePeriod
from portfolio.data.schemas import DailyRecord, TimeSeries
from portfolio.exceptions import EmptyResultError, NonOrderableValueError


def compare_prices(a: float, b: float) -> int:
    """Three-way comparison that refuses unorderable values.

    Returns:
        ``-1``, ``0`` or ``1`` as *a* is less than, equal to or greater
        than *b*.

    Raises:
        NonOrderableValueError: If either value is NaN.
    """
    if a > b:
        return 1
    if a < b:
        return -1
    if a == b:
        return 0
    raise NonOrderableValueError(f"Cannot order prices {a!r} and {b!r}")


def _reduce(values: Iterable[float], keep: Callable[[int], bool], label: str) -> float:
    result: Optional[float] = None
    for value in values:
        if math.isnan(value):
            raise NonOrderableValueError(f"NaN encountered while computing {label}")
        if result is None or keep(compare_prices(value, result)):
            result = value
    if result is None:
        raise EmptyResultError(f"Cannot compute {label} of an empty series")
    return result


def max_price(values: Iterable[float]) -> float:
    return _reduce(values, lambda order: order > 0, "maximum")


def min_price(values: Iterable[float]) -> float:
    return _reduce(values, lambda order: order < 0, "minimum")


def latest_record(series: TimeSeries) -> DailyRecord:
    """Record with the greatest date key."""
    if not series:
        raise EmptyResultError("Time series is empty")
    return series[max(series)]


def earliest_record(series: TimeSeries) -> DailyRecord:
    """Record with the smallest date key."""
    if not series:
        raise EmptyResultError("Time series is empty")
    return series[min(series)]


def latest_close(series: TimeSeries) -> float:
    """Close price on the most recent trading day in *series*.

    Raises:
        EmptyResultError: If *series* has no entries.
    """
    return latest_record(series).close


def filter_by_period(
    series: TimeSeries,
    period: TimePeriod,
    today: Optional[date] = None,
) -> TimeSeries:
    """Keep entries whose ``date + window >= today``.

    The boundary day is included: under ``MONTH`` an entry dated exactly
    30 days before *today* is kept, one dated 31 days before is dropped.

    Args:
        series: Full time series.
        period: Window selector.  ``ALL_TIME`` keeps everything.
        today: Anchor date.  Defaults to the local calendar date.
    """
    window = TimePeriod(period).window_days
    if window is None:
        return dict(series)

    today = today or date.today()
    span = timedelta(days=window)
    return {d: record for d, record in series.items() if d + span >= today}


def summarize(
    series: TimeSeries,
    period: TimePeriod,
    today: Optional[date] = None,
) -> EquitySummary:
    """Reduce the filtered window to latest/earliest close and high/low extremes.

    Args:
        series: Full time series.
        period: Window selector.
        today: Anchor date.  Defaults to the local calendar date.

    Returns:
        A fresh ``EquitySummary``.

    Raises:
        EmptyResultError: If no entries fall inside the window.
        NonOrderableValueError: If a high or low is NaN.
    """
    period = TimePeriod(period)
    today = today or date.today()

    window = filter_by_period(series, period, today=today)
    if not window:
        logger.warning(f"No trading days in period '{period.value}' as of {today}")
        raise EmptyResultError(
            f"No data in range for period '{period.value}' as of {today}"
        )

    logger.debug(f"Summarising {len(window)} of {len(series)} trading days ({period.value})")

    return EquitySummary(
        latest_price=latest_record(window).close,
        earliest_price=earliest_record(window).close,
        max_price=max_price(record.high for record in window.values()),
        min_price=min_price(record.low for record in window.values()),
    )
