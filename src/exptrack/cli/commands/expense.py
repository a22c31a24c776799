"""Expense commands."""

from datetime import date, datetime

import click
from exptrack.cli.error_handling import handle_domain_error
from exptrack.cli.session import require_user
from exptrack.domain.entities import Expense
from exptrack.domain.errors import DomainError
from exptrack.domain.ledger import LedgerService
from exptrack.utils.date_parser import parse_date


def _parse_date_or_exit(ctx: click.Context, value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def _format_expense(expense: Expense) -> str:
    line = f"{expense.hour:02d}:00  ${expense.amount:>10,.2f}  {expense.description}"
    if expense.notes:
        line += f" ({expense.notes})"
    return f"{line}  [ID: {expense.id}]"


@click.group()
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("add")
@click.option("--amount", required=True, help="Amount spent (e.g., 12.50)")
@click.option("--description", required=True, help="What the money was spent on")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Expense date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--hour", type=int, help="Hour of day, 0-23 (defaults to the current hour)")
@click.option("--notes", default="", help="Notes")
@click.pass_context
def add_expense(ctx, amount: str, description: str, date_str: str, hour: int | None, notes: str):
    """Log an expense.

    Examples:
        exptrack expense add --amount 4.50 --description Coffee
        exptrack expense add --amount 200 --description Lunch --date 2024-03-05 --hour 13
    """
    user = require_user(ctx)
    service = LedgerService(ctx.obj["repository"])

    expense_date = _parse_date_or_exit(ctx, date_str)
    if hour is None:
        hour = datetime.now().hour

    try:
        updated = service.add_expense(
            user,
            date=expense_date,
            hour=hour,
            amount=amount,
            description=description,
            notes=notes,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    created = updated.expenses[-1]
    click.echo(f"Added expense {created.id}")
    click.echo(f"  Date: {created.date} {created.hour:02d}:00")
    click.echo(f"  Amount: ${created.amount:,.2f}")
    click.echo(f"  Description: {created.description}")
    click.echo(f"Balance: ${updated.balance:,.2f}")


@expense_group.command("edit")
@click.argument("expense_id")
@click.option("--amount", help="New amount")
@click.option("--description", help="New description")
@click.option("--date", "date_str", help="New date (YYYY-MM-DD or relative)")
@click.option("--hour", type=int, help="New hour of day, 0-23")
@click.option("--notes", help="New notes")
@click.pass_context
def edit_expense(
    ctx,
    expense_id: str,
    amount: str | None,
    description: str | None,
    date_str: str | None,
    hour: int | None,
    notes: str | None,
):
    """Edit an expense. Options that are left out keep their current value."""
    user = require_user(ctx)
    service = LedgerService(ctx.obj["repository"])

    try:
        existing = service.get_expense(user, expense_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    expense_date = existing.date if date_str is None else _parse_date_or_exit(ctx, date_str)

    try:
        updated = service.update_expense(
            user,
            expense_id,
            date=expense_date,
            hour=existing.hour if hour is None else hour,
            amount=existing.amount if amount is None else amount,
            description=existing.description if description is None else description,
            notes=existing.notes if notes is None else notes,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated expense {expense_id}")
    click.echo(f"Balance: ${updated.balance:,.2f}")


@expense_group.command("delete")
@click.argument("expense_id")
@click.pass_context
def delete_expense(ctx, expense_id: str):
    """Delete an expense and credit its amount back to the balance."""
    user = require_user(ctx)
    service = LedgerService(ctx.obj["repository"])

    try:
        updated = service.delete_expense(user, expense_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted expense {expense_id}")
    click.echo(f"Balance: ${updated.balance:,.2f}")


@expense_group.command("list")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Day to show (YYYY-MM-DD or relative)",
)
@click.pass_context
def list_expenses(ctx, date_str: str):
    """Show the expenses of one day, ordered by hour."""
    user = require_user(ctx)
    service = LedgerService(ctx.obj["repository"])

    day = _parse_date_or_exit(ctx, date_str)
    expenses = service.expenses_for_day(user, day)

    if not expenses:
        click.echo(f"No expenses on {day}.")
        return

    click.echo(f"\nExpenses on {day}:")
    for expense in expenses:
        click.echo(f"  {_format_expense(expense)}")
    click.echo(f"\nTotal: ${service.total_for_day(user, day):,.2f}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
