"""Utility functions for spendtrack."""

from spendtrack.utils.date_parser import parse_date, parse_timestamp, to_timestamp
from spendtrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_timestamp", "to_timestamp", "parse_amount"]
