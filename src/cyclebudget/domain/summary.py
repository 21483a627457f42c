"""Cycle summary aggregation."""

from collections import defaultdict
from datetime import datetime, UTC
from decimal import Decimal
from typing import Optional, Sequence

from cyclebudget.domain.constants import COLORS
from cyclebudget.domain.cycle import current_cycle_start, normalize_cycle_months
from cyclebudget.domain.entities import (
    Category,
    CategoryRow,
    Settings,
    Summary,
    Transaction,
    TransactionType,
)
from cyclebudget.domain.frequency import cycle_amount
from cyclebudget.domain.ledger import cycle_transactions
from cyclebudget.utils.amount_parser import ZERO, coerce_amount


def summarize(
    categories: Sequence[Category],
    transactions: Sequence[Transaction],
    settings: Settings,
    now: Optional[datetime] = None,
) -> Summary:
    """Aggregate the current cycle for presentation.

    Args:
        categories: All categories, in display order
        transactions: Full transaction log (expenses and income)
        settings: User settings providing the cycle length
        now: Reference time; defaults to the current UTC time

    Returns:
        Summary for the cycle containing ``now``
    """
    if now is None:
        now = datetime.now(UTC)

    cycle_months = normalize_cycle_months(settings.cycle_months)
    cycle_start = current_cycle_start(now, cycle_months)

    expenses = cycle_transactions(transactions, TransactionType.EXPENSE, cycle_start)
    income = cycle_transactions(transactions, TransactionType.BUDGET, cycle_start)

    total_budget_limit = sum(
        (
            cycle_amount(cat.base_limit, cat.base_frequency, cycle_months)
            for cat in categories
        ),
        ZERO,
    )
    total_income = sum_amounts(income)
    total_expenses = sum_amounts(expenses)

    expense_by_category = aggregate_by_category(expenses)

    return Summary(
        cycle_start=cycle_start,
        cycle_months=cycle_months,
        total_budget_limit=total_budget_limit,
        total_income=total_income,
        total_expenses=total_expenses,
        remaining=total_budget_limit - total_expenses,
        is_over_actual_income=total_expenses > total_income and total_income > 0,
        expense_by_source=aggregate_by_source(expenses),
        expense_by_category=expense_by_category,
        category_rows=tuple(
            build_category_rows(categories, expense_by_category, cycle_months)
        ),
    )


def sum_amounts(transactions: Sequence[Transaction]) -> Decimal:
    """Sum transaction amounts, treating malformed amounts as 0."""
    return sum((coerce_amount(txn.amount) for txn in transactions), ZERO)


def aggregate_by_source(expenses: Sequence[Transaction]) -> dict[str, Decimal]:
    """Sum expenses per source, largest first (ties keep first-seen order)."""
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in expenses:
        totals[txn.source] += coerce_amount(txn.amount)
    return dict(sorted(totals.items(), key=lambda item: item[1], reverse=True))


def aggregate_by_category(expenses: Sequence[Transaction]) -> dict[str, Decimal]:
    """Sum expenses per category ID."""
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in expenses:
        totals[txn.category_id] += coerce_amount(txn.amount)
    return dict(totals)


def spend_percentage(spent: Decimal, cycle_limit: Decimal) -> Decimal:
    """Spent as a percentage of the cycle limit; 0 without a limit."""
    if cycle_limit <= 0:
        return ZERO
    return spent / cycle_limit * 100


def build_category_rows(
    categories: Sequence[Category],
    expense_by_category: dict[str, Decimal],
    cycle_months: int,
) -> list[CategoryRow]:
    """Build one row per category that has spend or a configured limit."""
    rows = []
    for index, cat in enumerate(categories):
        spent = expense_by_category.get(cat.id, ZERO)
        limit = cycle_amount(cat.base_limit, cat.base_frequency, cycle_months)
        if spent <= 0 and limit <= 0:
            continue

        rows.append(
            CategoryRow(
                category_id=cat.id,
                name=cat.name,
                spent=spent,
                cycle_limit=limit,
                base_limit=max(coerce_amount(cat.base_limit), ZERO),
                base_frequency=cat.base_frequency,
                percentage=spend_percentage(spent, limit),
                color=cat.color or COLORS[index % len(COLORS)],
                icon=cat.icon,
            )
        )
    return rows
