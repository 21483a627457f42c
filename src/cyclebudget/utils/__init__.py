"""Utility functions for cyclebudget."""

from cyclebudget.utils.date_parser import parse_reference_time
from cyclebudget.utils.amount_parser import parse_amount, coerce_amount
from cyclebudget.utils.currency import format_currency, resolve_currency

__all__ = [
    "parse_reference_time",
    "parse_amount",
    "coerce_amount",
    "format_currency",
    "resolve_currency",
]
