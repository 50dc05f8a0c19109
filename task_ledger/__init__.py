"""Category-grouped task ledger read from line-delimited records."""

__version__ = "0.1.0"
