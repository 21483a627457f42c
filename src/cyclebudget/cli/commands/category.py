"""Category management commands."""

import click

from cyclebudget.cli.error_handling import handle_domain_error
from cyclebudget.domain.category import CategoryService
from cyclebudget.domain.entities import BaseFrequency
from cyclebudget.domain.errors import DomainError
from cyclebudget.domain.frequency import cycle_amount
from cyclebudget.domain.settings import SettingsService
from cyclebudget.utils.amount_parser import parse_amount
from cyclebudget.utils.currency import format_currency

FREQUENCY_CHOICES = [freq.value for freq in BaseFrequency]


def resolve_category_or_exit(ctx, service: CategoryService, name_or_id: str):
    """Resolve a category by ID or name, exiting with an error if missing."""
    category = service.find_category(name_or_id)
    if category is None:
        click.echo(f"Error: Category '{name_or_id}' not found", err=True)
        ctx.exit(1)
    return category


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List categories with their limits for the current cycle length."""
    store = ctx.obj["store"]
    namespace = ctx.obj["namespace"]
    service = CategoryService(store, namespace)
    settings = SettingsService(store, namespace).get_settings()

    categories = service.list_categories()
    if not categories:
        click.echo("No categories found. Create one with 'category create'.")
        return

    click.echo(f"\nCategories (cycle: {settings.cycle_months} month(s)):")
    for cat in categories:
        limit = cycle_amount(cat.base_limit, cat.base_frequency, settings.cycle_months)
        click.echo(
            f"  {cat.name:<30} "
            f"{format_currency(limit, settings.currency_code):>14} per cycle  "
            f"(base {format_currency(cat.base_limit, settings.currency_code)} / "
            f"{cat.base_frequency.display_name})  ID: {cat.id}"
        )


@category_group.command("create")
@click.argument("name")
@click.option("--limit", "base_limit", default="0", help="Spending limit at the base frequency (default: 0)")
@click.option(
    "--frequency",
    type=click.Choice(FREQUENCY_CHOICES, case_sensitive=False),
    default=BaseFrequency.MONTHLY.value,
    help="Base frequency of the limit (default: monthly)",
)
@click.option("--color", help="Display colour, e.g. '#03A9F4'")
@click.option("--icon", help="Display icon tag")
@click.pass_context
def create_category(ctx, name: str, base_limit: str, frequency: str, color: str | None, icon: str | None):
    """Create a new category."""
    service = CategoryService(ctx.obj["store"], ctx.obj["namespace"])

    try:
        limit = parse_amount(base_limit)
        category_id = service.create_category(
            name=name,
            base_limit=limit,
            base_frequency=frequency,
            color=color,
            icon=icon,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created category '{name.strip()}' (ID: {category_id})")


@category_group.command("update")
@click.argument("category")
@click.option("--name", help="New display name")
@click.option("--limit", "base_limit", help="New limit at the base frequency")
@click.option(
    "--frequency",
    type=click.Choice(FREQUENCY_CHOICES, case_sensitive=False),
    help="New base frequency",
)
@click.option("--color", help="New display colour")
@click.option("--icon", help="New display icon tag")
@click.pass_context
def update_category(
    ctx,
    category: str,
    name: str | None,
    base_limit: str | None,
    frequency: str | None,
    color: str | None,
    icon: str | None,
):
    """Update a category (by name or ID). Only supplied fields change."""
    service = CategoryService(ctx.obj["store"], ctx.obj["namespace"])
    existing = resolve_category_or_exit(ctx, service, category)

    try:
        limit = parse_amount(base_limit) if base_limit is not None else None
        service.update_category(
            existing.id,
            name=name,
            base_limit=limit,
            base_frequency=frequency,
            color=color,
            icon=icon,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated category '{existing.name}'")


@category_group.command("delete")
@click.argument("category")
@click.pass_context
def delete_category(ctx, category: str):
    """Delete a category (by name or ID). Its transactions are kept."""
    service = CategoryService(ctx.obj["store"], ctx.obj["namespace"])
    existing = resolve_category_or_exit(ctx, service, category)

    try:
        service.delete_category(existing.id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted category '{existing.name}'")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
