"""
Command-line entry point.

Usage::

    portfolio latest-price AAPL
    portfolio summary AAPL --period month --json
    portfolio history MSFT --period year --output-size full

Results go to stdout, diagnostics to stderr.  Any pipeline failure
exits with status 1; argparse rejects unknown subcommands with status 2.
"""
import argparse
import json
import sys
from typing import Callable, List, Optional

from dotenv import load_dotenv
from loguru import logger

from portfolio import __version__
from portfolio.config import VantageSettings
from portfolio.core.engine import EquityEngine
from portfolio.core.frames import series_to_frame
from portfolio.core.types import TimePeriod
from portfolio.data.adapters.alpha_vantage_adapter import AlphaVantageAdapter
from portfolio.data.schemas import OutputSize, Symbol
from portfolio.exceptions import PortfolioError
from portfolio.utils.logger import setup_logger

EngineFactory = Callable[[], EquityEngine]


def default_engine() -> EquityEngine:
    """Build the production engine from environment settings."""
    settings = VantageSettings.from_env()
    return EquityEngine(provider=AlphaVantageAdapter(settings))


def _symbol(value: str) -> Symbol:
    try:
        return Symbol(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid symbol: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio",
        description="Daily equity quotes and period summaries from Alpha Vantage.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log progress to stderr",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Log debug detail to stderr",
    )
    parser.add_argument(
        "--log-dir", type=str, default=None,
        help="Also write rotated debug logs to this directory",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    periods = [p.value for p in TimePeriod]

    latest = sub.add_parser("latest-price", help="Most recent closing price")
    latest.add_argument("symbol", type=_symbol)
    latest.add_argument("--json", action="store_true", help="Print JSON")

    summary = sub.add_parser("summary", help="Latest/earliest close and high/low extremes")
    summary.add_argument("symbol", type=_symbol)
    summary.add_argument(
        "--period", choices=periods, default=TimePeriod.YEAR.value,
        help="Window to summarise (default: year)",
    )
    summary.add_argument("--json", action="store_true", help="Print JSON")

    history = sub.add_parser("history", help="Daily records inside a window")
    history.add_argument("symbol", type=_symbol)
    history.add_argument(
        "--period", choices=periods, default=TimePeriod.MONTH.value,
        help="Window to list (default: month)",
    )
    history.add_argument(
        "--output-size", choices=[s.value for s in OutputSize],
        default=OutputSize.COMPACT.value,
        help="Upstream history length (default: compact)",
    )

    return parser


def run(args: argparse.Namespace, engine: EquityEngine) -> None:
    """Execute one parsed command and print its result."""
    symbol = args.symbol

    if args.command == "latest-price":
        price = engine.get_latest_price(symbol)
        if args.json:
            print(json.dumps({"symbol": str(symbol), "price": price}))
        else:
            print(f"{symbol}: {price}")

    elif args.command == "summary":
        result = engine.summary(symbol, TimePeriod(args.period))
        if args.json:
            print(result.model_dump_json())
        else:
            print(f"{symbol} ({args.period})")
            print(f"  latest:   {result.latest_price}")
            print(f"  earliest: {result.earliest_price}")
            print(f"  max:      {result.max_price}")
            print(f"  min:      {result.min_price}")

    elif args.command == "history":
        series = engine.history(
            symbol,
            TimePeriod(args.period),
            output_size=OutputSize(args.output_size),
        )
        df = series_to_frame(series, symbol)
        if df.empty:
            print(f"No trading days for {symbol} in period '{args.period}'.")
        else:
            print(df.to_string(index=False))


def main(
    argv: Optional[List[str]] = None,
    engine_factory: EngineFactory = default_engine,
) -> int:
    """Parse *argv*, run the command and return the process exit status."""
    args = build_parser().parse_args(argv)

    level = "DEBUG" if args.debug else "INFO" if args.verbose else "WARNING"
    setup_logger(level=level, log_dir=args.log_dir)
    load_dotenv()

    try:
        engine = engine_factory()
        run(args, engine)
    except PortfolioError as e:
        logger.debug(f"{type(e).__name__} while running '{args.command}'")
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
