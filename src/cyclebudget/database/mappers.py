"""Mapper functions to convert between store documents and domain entities.

Legacy field handling lives here and nowhere else: a document is normalized
once on load and the rest of the application only sees the canonical shape.
"""

import logging
from datetime import datetime, UTC
from decimal import Decimal
from typing import Any, Optional

from dateutil.parser import isoparse

from cyclebudget.database.base import Document
from cyclebudget.domain import entities as domain
from cyclebudget.domain.constants import (
    CURRENCIES,
    DEFAULT_CURRENCY_CODE,
    DEFAULT_CYCLE_MONTHS,
    INCOME_CATEGORY_ID,
    UNKNOWN_EXPENSE_SOURCE,
    UNKNOWN_INCOME_SOURCE,
)
from cyclebudget.utils.amount_parser import coerce_amount

logger = logging.getLogger(__name__)


def migrate_category_document(doc: Document) -> Document:
    """Return a category document in canonical field layout.

    - ``baseLimit`` falls back to the deprecated ``budgetLimit``, then 0
    - a missing or unknown ``baseFrequency`` becomes ``monthly``
    - ``budgetLimit`` is dropped
    """
    migrated = {key: value for key, value in doc.items() if key != "budgetLimit"}

    base_limit = coerce_amount(doc.get("baseLimit"))
    if base_limit == 0 and "budgetLimit" in doc:
        base_limit = coerce_amount(doc.get("budgetLimit"))
        logger.debug("Category %s: using legacy budgetLimit", doc.get("id"))
    migrated["baseLimit"] = str(max(base_limit, Decimal("0")))
    migrated["baseFrequency"] = domain.BaseFrequency.parse(doc.get("baseFrequency")).value
    migrated["name"] = str(doc.get("name") or "").strip()
    return migrated


def category_from_document(doc: Document) -> domain.Category:
    """Convert a stored category document to a domain Category entity."""
    canonical = migrate_category_document(doc)
    return domain.Category(
        id=str(canonical["id"]),
        name=canonical["name"],
        base_limit=Decimal(canonical["baseLimit"]),
        base_frequency=domain.BaseFrequency(canonical["baseFrequency"]),
        color=canonical.get("color") or None,
        icon=canonical.get("icon") or None,
    )


def category_to_document(
    name: str,
    base_limit: Decimal,
    base_frequency: domain.BaseFrequency,
    color: Optional[str],
    icon: Optional[str],
) -> Document:
    """Build the stored shape of a category."""
    return {
        "name": name,
        "baseLimit": str(base_limit),
        "baseFrequency": base_frequency.value,
        "color": color,
        "icon": icon,
    }


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a stored timestamp into an aware datetime (naive means UTC)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        # Epoch milliseconds
        parsed = datetime.fromtimestamp(value / 1000, UTC)
    else:
        try:
            parsed = isoparse(str(value))
        except ValueError:
            logger.warning("Unparseable timestamp %r", value)
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def transaction_from_document(doc: Document) -> domain.Transaction:
    """Convert a stored ledger document to a domain Transaction entity."""
    try:
        txn_type = domain.TransactionType(doc.get("type"))
    except ValueError:
        logger.warning("Transaction %s has unknown type %r", doc.get("id"), doc.get("type"))
        txn_type = domain.TransactionType.EXPENSE

    timestamp = parse_timestamp(doc.get("timestamp"))
    if timestamp is None:
        timestamp = datetime.now(UTC)

    default_source = (
        UNKNOWN_EXPENSE_SOURCE
        if txn_type == domain.TransactionType.EXPENSE
        else UNKNOWN_INCOME_SOURCE
    )
    category_id = doc.get("categoryId")
    if txn_type == domain.TransactionType.BUDGET:
        category_id = category_id or INCOME_CATEGORY_ID

    return domain.Transaction(
        id=str(doc["id"]),
        amount=coerce_amount(doc.get("amount")),
        type=txn_type,
        category_id=str(category_id or ""),
        source=str(doc.get("source") or "").strip() or default_source,
        timestamp=timestamp,
    )


def transaction_to_document(
    amount: Decimal,
    txn_type: domain.TransactionType,
    category_id: str,
    source: str,
    timestamp: datetime,
) -> Document:
    """Build the stored shape of a ledger entry."""
    return {
        "amount": str(amount),
        "type": txn_type.value,
        "categoryId": category_id,
        "source": source,
        "timestamp": timestamp.astimezone(UTC).isoformat(),
    }


def settings_from_document(doc: Optional[Document]) -> domain.Settings:
    """Convert the stored settings document, filling in defaults."""
    doc = doc or {}

    currency_code = str(doc.get("currencyCode") or DEFAULT_CURRENCY_CODE).upper()
    if currency_code not in CURRENCIES:
        logger.warning(
            "Unknown currency %r, using %s", currency_code, DEFAULT_CURRENCY_CODE
        )
        currency_code = DEFAULT_CURRENCY_CODE

    cycle_months = doc.get("cycleMonths", DEFAULT_CYCLE_MONTHS)
    try:
        cycle_months = int(cycle_months)
    except (TypeError, ValueError):
        cycle_months = DEFAULT_CYCLE_MONTHS

    return domain.Settings(currency_code=currency_code, cycle_months=cycle_months)


def settings_to_document(
    currency_code: Optional[str] = None, cycle_months: Optional[int] = None
) -> Document:
    """Build a partial settings document holding only supplied fields."""
    doc: Document = {}
    if currency_code is not None:
        doc["currencyCode"] = currency_code
    if cycle_months is not None:
        doc["cycleMonths"] = cycle_months
    return doc
