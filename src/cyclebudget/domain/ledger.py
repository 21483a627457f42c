"""Read-only views over the transaction log.

None of these functions mutate their input; filters preserve input order.
"""

from collections import defaultdict
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from cyclebudget.domain.entities import Transaction, TransactionType


def filter_by_type(
    transactions: Iterable[Transaction], txn_type: TransactionType | str
) -> list[Transaction]:
    """Keep transactions whose type matches exactly."""
    txn_type = TransactionType(txn_type)
    return [txn for txn in transactions if txn.type == txn_type]


def filter_by_window(
    transactions: Iterable[Transaction],
    start_date: datetime,
    end_date: Optional[datetime] = None,
) -> list[Transaction]:
    """Keep transactions with start_date <= timestamp (<= end_date, if given)."""
    return [
        txn
        for txn in transactions
        if txn.timestamp >= start_date
        and (end_date is None or txn.timestamp <= end_date)
    ]


def cycle_transactions(
    transactions: Iterable[Transaction],
    txn_type: TransactionType | str,
    start_date: datetime,
    end_date: Optional[datetime] = None,
) -> list[Transaction]:
    """Narrow by type first, then by window."""
    return filter_by_window(filter_by_type(transactions, txn_type), start_date, end_date)


def sort_newest_first(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Return a new list ordered by timestamp, most recent first."""
    return sorted(transactions, key=lambda txn: txn.timestamp, reverse=True)


def group_by_day(transactions: Sequence[Transaction]) -> dict[date, list[Transaction]]:
    """Group transactions by calendar day, keeping their relative order."""
    grouped: dict[date, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        grouped[txn.timestamp.date()].append(txn)
    return dict(grouped)
