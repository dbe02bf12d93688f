"""
Launcher for running from a source checkout.

Usage::

    uv run main.py latest-price AAPL
    uv run main.py summary AAPL --period year
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from portfolio.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
