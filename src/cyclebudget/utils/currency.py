"""Currency display helpers."""

import logging
from decimal import Decimal

from cyclebudget.domain.constants import CURRENCIES, DEFAULT_CURRENCY_CODE
from cyclebudget.domain.entities import Currency
from cyclebudget.utils.amount_parser import coerce_amount

logger = logging.getLogger(__name__)


def resolve_currency(currency_code: str | None) -> Currency:
    """Look up a currency, falling back to the default for unknown codes."""
    code = (currency_code or "").strip().upper()
    currency = CURRENCIES.get(code)
    if currency is None:
        logger.debug("Unknown currency %r, displaying as %s", currency_code, DEFAULT_CURRENCY_CODE)
        return CURRENCIES[DEFAULT_CURRENCY_CODE]
    return currency


def format_currency(amount: Decimal | float | int | None, currency_code: str | None) -> str:
    """Format an amount as '<symbol> <amount>' with two decimals."""
    symbol = resolve_currency(currency_code).symbol
    return f"{symbol} {coerce_amount(amount):,.2f}"
