"""
Tabular view of a daily time series.

Converts the ``{date: DailyRecord}`` mapping into a long-format pandas
DataFrame with one ``ticker`` column and ``*_price`` columns
(``trade_date``, ``open_price`` ...), sorted oldest first.
"""
import pandas as pd

from portfolio.data.schemas import Symbol, TimeSeries

FRAME_COLUMNS = [
    "trade_date",
    "ticker",
    "open_price",
    "high_price",
    "low_price",
    "close_price",
    "adj_close",
    "volume",
    "dividend_amount",
    "split_coefficient",
]


def series_to_frame(series: TimeSeries, symbol: Symbol) -> pd.DataFrame:
    """Return *series* as a DataFrame with one row per trading day.

    An empty series yields an empty frame that still carries every column.
    """
    rows = [
        {
            "trade_date": trade_date,
            "ticker": str(symbol),
            "open_price": record.open,
            "high_price": record.high,
            "low_price": record.low,
            "close_price": record.close,
            "adj_close": record.adjusted_close,
            "volume": record.volume,
            "dividend_amount": record.dividend_amount,
            "split_coefficient": record.split_coefficient,
        }
        for trade_date, record in series.items()
    ]

    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return df.sort_values("trade_date").reset_index(drop=True)
