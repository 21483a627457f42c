"""Settings commands."""

import click

from cyclebudget.cli.error_handling import handle_domain_error
from cyclebudget.domain.constants import ALLOWED_CYCLE_MONTHS, CURRENCIES
from cyclebudget.domain.errors import DomainError
from cyclebudget.domain.settings import SettingsService
from cyclebudget.utils.currency import resolve_currency


def print_settings(settings) -> None:
    currency = resolve_currency(settings.currency_code)
    click.echo(f"Currency: {currency.code} ({currency.symbol}, {currency.name})")
    click.echo(f"Budget cycle: {settings.cycle_months} month(s)")


@click.group()
def settings_group():
    """View or change budget settings."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show current settings."""
    service = SettingsService(ctx.obj["store"], ctx.obj["namespace"])
    print_settings(service.get_settings())


@settings_group.command("set")
@click.option(
    "--cycle-months",
    type=click.Choice([str(value) for value in ALLOWED_CYCLE_MONTHS]),
    help="Budget cycle length in months",
)
@click.option(
    "--currency",
    type=click.Choice(list(CURRENCIES), case_sensitive=False),
    help="Display currency",
)
@click.pass_context
def set_settings(ctx, cycle_months: str | None, currency: str | None):
    """Change settings. Options left out keep their current values."""
    if cycle_months is None and currency is None:
        click.echo("Error: Specify --cycle-months and/or --currency", err=True)
        ctx.exit(1)

    service = SettingsService(ctx.obj["store"], ctx.obj["namespace"])
    try:
        updated = service.update_settings(
            cycle_months=int(cycle_months) if cycle_months is not None else None,
            currency_code=currency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("Settings updated")
    print_settings(updated)


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
