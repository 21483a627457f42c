"""Transaction commands."""

import click

from cyclebudget.cli.commands.category import resolve_category_or_exit
from cyclebudget.cli.error_handling import handle_domain_error
from cyclebudget.domain.category import CategoryService
from cyclebudget.domain.errors import DomainError
from cyclebudget.domain.ledger import group_by_day
from cyclebudget.domain.settings import SettingsService
from cyclebudget.domain.transaction import TransactionService
from cyclebudget.utils.amount_parser import parse_amount
from cyclebudget.utils.currency import format_currency


@click.command("add-expense")
@click.option("--amount", required=True, help="Amount spent (e.g., 12.50)")
@click.option("--category", required=True, help="Category name or ID")
@click.option("--source", default="", help="Payment source (default: Unknown)")
@click.pass_context
def add_expense(ctx, amount: str, category: str, source: str):
    """Record an expense.

    Examples:
        cyclebudget add-expense --amount 42.10 --category Groceries --source "Debit card"
    """
    store = ctx.obj["store"]
    namespace = ctx.obj["namespace"]
    category_obj = resolve_category_or_exit(ctx, CategoryService(store, namespace), category)
    settings = SettingsService(store, namespace).get_settings()

    try:
        txn_amount = parse_amount(amount)
        transaction_id = TransactionService(store, namespace).add_expense(
            amount=txn_amount, category_id=category_obj.id, source=source
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Recorded expense {transaction_id}")
    click.echo(f"  Category: {category_obj.name}")
    click.echo(f"  Amount: {format_currency(txn_amount, settings.currency_code)}")


@click.command("add-income")
@click.option("--amount", required=True, help="Amount received (e.g., 2500)")
@click.option("--source", default="", help="Income source (default: Uncategorized Income)")
@click.pass_context
def add_income(ctx, amount: str, source: str):
    """Record an income entry.

    Examples:
        cyclebudget add-income --amount 2500 --source Salary
    """
    store = ctx.obj["store"]
    namespace = ctx.obj["namespace"]
    settings = SettingsService(store, namespace).get_settings()

    try:
        txn_amount = parse_amount(amount)
        transaction_id = TransactionService(store, namespace).add_income(
            amount=txn_amount, source=source
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Recorded income {transaction_id}")
    click.echo(f"  Amount: {format_currency(txn_amount, settings.currency_code)}")


@click.group()
def transaction_group():
    """Browse and delete transactions."""
    pass


@transaction_group.command("list")
@click.option("--limit", type=int, help="Maximum number of transactions to show")
@click.pass_context
def list_transactions(ctx, limit: int | None):
    """Show transaction history, newest first, grouped by day."""
    store = ctx.obj["store"]
    namespace = ctx.obj["namespace"]
    settings = SettingsService(store, namespace).get_settings()
    category_names = {
        cat.id: cat.name for cat in CategoryService(store, namespace).list_categories()
    }

    transactions = TransactionService(store, namespace).list_transactions(newest_first=True)
    if not transactions:
        click.echo("No transactions recorded yet.")
        return
    if limit is not None:
        transactions = transactions[:limit]

    for day, day_transactions in group_by_day(transactions).items():
        click.echo(f"\n{day.strftime('%a %b %d %Y')}")
        for txn in day_transactions:
            if txn.is_expense:
                label = category_names.get(txn.category_id, "Uncategorized")
                sign = "-"
            else:
                label = "Income"
                sign = "+"
            amount_str = f"{sign} {format_currency(txn.amount, settings.currency_code)}"
            click.echo(
                f"  {txn.timestamp.strftime('%H:%M')}  {label:<20} {txn.source:<24} "
                f"{amount_str:>16}  ID: {txn.id}"
            )


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.pass_context
def delete_transaction(ctx, transaction_id: str):
    """Delete a transaction."""
    service = TransactionService(ctx.obj["store"], ctx.obj["namespace"])
    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(add_expense)
    cli.add_command(add_income)
    cli.add_command(transaction_group, name="transaction")
