"""Analytics commands."""

import calendar
from datetime import date

import click
from exptrack.cli.error_handling import handle_domain_error
from exptrack.cli.session import require_user
from exptrack.domain import analytics as analytics_service
from exptrack.domain.errors import DomainError


@click.group()
def analytics_group():
    """Yearly, monthly and category totals."""
    pass


@analytics_group.command("yearly")
@click.option("--year", type=int, help="Year (defaults to the current year)")
@click.pass_context
def yearly(ctx, year: int | None):
    """Totals per month of a year."""
    user = require_user(ctx)
    if year is None:
        year = date.today().year

    totals = analytics_service.yearly_totals(user.expenses, year)

    click.echo(f"\nSpending in {year}:")
    for month, total in enumerate(totals, start=1):
        click.echo(f"  {calendar.month_abbr[month]}  ${total:>12,.2f}")
    click.echo(f"\nTotal: ${sum(totals):,.2f}")


@analytics_group.command("monthly")
@click.option("--year", type=int, help="Year (defaults to the current year)")
@click.option("--month", type=int, help="Month 1-12 (defaults to the current month)")
@click.pass_context
def monthly(ctx, year: int | None, month: int | None):
    """Totals per day of a month."""
    user = require_user(ctx)
    today = date.today()
    if year is None:
        year = today.year
    if month is None:
        month = today.month

    try:
        totals = analytics_service.daily_totals(user.expenses, year, month)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nSpending in {calendar.month_name[month]} {year}:")
    for day, total in enumerate(totals, start=1):
        if total:
            click.echo(f"  Day {day:>2}  ${total:>12,.2f}")
    click.echo(f"\nTotal: ${sum(totals):,.2f}")


@analytics_group.command("categories")
@click.option("--year", type=int, help="Year (defaults to the current year)")
@click.option("--month", type=int, help="Month 1-12 (defaults to the current month)")
@click.pass_context
def categories(ctx, year: int | None, month: int | None):
    """Largest spending categories of a month."""
    user = require_user(ctx)
    today = date.today()
    if year is None:
        year = today.year
    if month is None:
        month = today.month

    try:
        breakdown = analytics_service.category_breakdown(user.expenses, year, month)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not breakdown:
        click.echo(f"No expenses in {calendar.month_name[month]} {year}.")
        return

    click.echo(f"\nCategories in {calendar.month_name[month]} {year}:")
    for entry in breakdown:
        click.echo(f"  {entry.category:<24} ${entry.total:>12,.2f}")


def register_commands(cli):
    """Register analytics commands with main CLI."""
    cli.add_command(analytics_group, name="analytics")
