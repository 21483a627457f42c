"""Historical comparison of expenses across cycles."""

from datetime import datetime, UTC
from typing import Optional, Sequence

from cyclebudget.domain.constants import DEFAULT_TREND_CYCLES
from cyclebudget.domain.cycle import historical_cycles
from cyclebudget.domain.entities import Transaction, TransactionType, TrendPoint
from cyclebudget.domain.ledger import cycle_transactions
from cyclebudget.domain.summary import sum_amounts


def build_trend(
    transactions: Sequence[Transaction],
    cycle_months,
    now: Optional[datetime] = None,
    count: int = DEFAULT_TREND_CYCLES,
) -> list[TrendPoint]:
    """Total expenses for the current cycle and the ``count - 1`` before it.

    Each window is bounded on both ends. An empty ledger or a cycle length
    of zero or less yields an empty list, meaning "no data" rather than a
    series of zeros. Numeric strings such as "2" are accepted.

    Args:
        transactions: Full transaction log
        cycle_months: Cycle length in months (int or numeric string)
        now: Reference time; defaults to the current UTC time
        count: Number of cycles to compare

    Returns:
        List of TrendPoint, oldest first with the current cycle last
    """
    try:
        months = int(cycle_months)
    except (TypeError, ValueError):
        months = 0
    if not transactions or months <= 0:
        return []
    if now is None:
        now = datetime.now(UTC)

    return [
        TrendPoint(
            label=window.label,
            total_expenses=sum_amounts(
                cycle_transactions(
                    transactions,
                    TransactionType.EXPENSE,
                    window.start_date,
                    window.end_date,
                )
            ),
            is_current=window.is_current,
        )
        for window in historical_cycles(now, cycle_months, count)
    ]
