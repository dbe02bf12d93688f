"""Daily quote lookups and period summaries for a single equity."""

__version__ = "0.2.0"
