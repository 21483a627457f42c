"""Summary and trend commands."""

import click

from cyclebudget.domain.category import CategoryService
from cyclebudget.domain.constants import DEFAULT_TREND_CYCLES
from cyclebudget.domain.entities import BudgetStatus
from cyclebudget.domain.settings import SettingsService
from cyclebudget.domain.summary import summarize
from cyclebudget.domain.transaction import TransactionService
from cyclebudget.domain.trend import build_trend
from cyclebudget.utils.currency import format_currency
from cyclebudget.utils.date_parser import parse_reference_time

STATUS_MARKERS = {
    BudgetStatus.NORMAL: " ",
    BudgetStatus.WARNING: "!",
    BudgetStatus.CRITICAL: "X",
}


def _resolve_as_of_or_exit(ctx, as_of: str | None):
    try:
        return parse_reference_time(as_of)
    except ValueError as e:
        click.echo(f"Error: Invalid --as-of value: {e}", err=True)
        ctx.exit(1)


def _months_label(cycle_months: int) -> str:
    return f"{cycle_months} Month{'s' if cycle_months > 1 else ''}"


@click.command("summary")
@click.option("--as-of", help="Reference time (default: now; e.g. '2024-03-15', 'last month')")
@click.pass_context
def summary(ctx, as_of: str | None):
    """Show remaining budget and spend for the current cycle."""
    store = ctx.obj["store"]
    namespace = ctx.obj["namespace"]
    now = _resolve_as_of_or_exit(ctx, as_of)

    settings = SettingsService(store, namespace).get_settings()
    categories = CategoryService(store, namespace).list_categories()
    transactions = TransactionService(store, namespace).list_transactions()
    result = summarize(categories, transactions, settings, now=now)

    def money(amount) -> str:
        return format_currency(amount, settings.currency_code)

    click.echo(
        f"\nTotal Budget Remaining ({_months_label(result.cycle_months)}): "
        f"{money(result.remaining)}"
    )
    click.echo(f"  Cycle started: {result.cycle_start.strftime('%Y-%m-%d')}")
    click.echo(f"  Total budget limit: {money(result.total_budget_limit)}")
    click.echo(f"  Total income: {money(result.total_income)}")
    click.echo(f"  Total expenses: {money(result.total_expenses)}")

    if result.is_over_actual_income:
        click.echo(
            f"\nWarning: Your expenses ({money(result.total_expenses)}) exceed your "
            f"total recorded income ({money(result.total_income)})."
        )

    click.echo("\nExpense Sources:")
    if not result.expense_by_source:
        click.echo("  No expenses logged yet in this cycle.")
    for source, amount in result.expense_by_source.items():
        click.echo(f"  {source or 'Unspecified':<40} {money(amount):>16}")

    click.echo("\nCategories:")
    if not result.category_rows:
        click.echo("  No categories with a limit or spending. Create one with 'category create'.")
    for row in result.category_rows:
        click.echo(
            f"  [{STATUS_MARKERS[row.status]}] {row.name:<24} "
            f"{money(row.spent):>14} of {money(row.cycle_limit):>14} "
            f"({row.percentage:.0f}%)"
        )
        click.echo(
            f"      Base: {money(row.base_limit)} / {row.base_frequency.display_name}"
        )
        if row.is_over_limit:
            click.echo(f"      OVERSPENT by {money(row.overspend)}")


@click.command("trend")
@click.option(
    "--cycles",
    type=click.IntRange(min=1),
    default=DEFAULT_TREND_CYCLES,
    show_default=True,
    help="Number of cycles to compare, including the current one",
)
@click.option("--as-of", help="Reference time (default: now)")
@click.pass_context
def trend(ctx, cycles: int, as_of: str | None):
    """Compare total expenses across recent cycles, oldest first."""
    store = ctx.obj["store"]
    namespace = ctx.obj["namespace"]
    now = _resolve_as_of_or_exit(ctx, as_of)

    settings = SettingsService(store, namespace).get_settings()
    transactions = TransactionService(store, namespace).list_transactions()
    points = build_trend(transactions, settings.cycle_months, now=now, count=cycles)

    if not points:
        click.echo("No historical data to compare yet.")
        return

    click.echo(
        f"\nExpenses over the last {len(points)} cycles "
        f"(each {_months_label(settings.cycle_months).lower()}):"
    )
    for point in points:
        marker = "*" if point.is_current else " "
        click.echo(
            f" {marker} {point.label:<20} "
            f"{format_currency(point.total_expenses, settings.currency_code):>16}"
        )


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(summary)
    cli.add_command(trend)
