"""Balance commands."""

import click
from exptrack.cli.error_handling import handle_domain_error
from exptrack.cli.session import require_user
from exptrack.domain.errors import DomainError
from exptrack.domain.ledger import LedgerService


@click.group()
def balance_group():
    """Show or set the balance."""
    pass


@balance_group.command("show")
@click.pass_context
def show_balance(ctx):
    """Show the current balance."""
    user = require_user(ctx)
    click.echo(f"Balance: ${user.balance:,.2f}")


@balance_group.command("set")
@click.argument("amount")
@click.pass_context
def set_balance(ctx, amount: str):
    """Set the balance to AMOUNT.

    Negative values need a leading "--" so they are not read as options:

        exptrack balance set -- -120.00
    """
    user = require_user(ctx)
    service = LedgerService(ctx.obj["repository"])

    try:
        updated = service.set_balance(user, amount)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Balance: ${updated.balance:,.2f}")


def register_commands(cli):
    """Register balance commands with main CLI."""
    cli.add_command(balance_group, name="balance")
