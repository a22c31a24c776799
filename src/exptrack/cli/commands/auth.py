"""Registration and session commands."""

import click
from exptrack.cli.error_handling import handle_domain_error
from exptrack.domain.account import AccountService
from exptrack.domain.errors import DomainError


@click.command("register")
@click.argument("username")
@click.password_option("--password", help="Password for the new account")
@click.pass_context
def register(ctx, username: str, password: str):
    """Create an account and log in as it.

    Examples:
        exptrack register alice
        exptrack register alice --password secret
    """
    service = AccountService(ctx.obj["repository"])

    try:
        user = service.register(username, password)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Registered and logged in as '{user.username}'")


@click.command("login")
@click.argument("username")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
@click.pass_context
def login(ctx, username: str, password: str):
    """Log in to an existing account."""
    service = AccountService(ctx.obj["repository"])

    try:
        user = service.login(username, password)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Logged in as '{user.username}'")


@click.command("logout")
@click.pass_context
def logout(ctx):
    """Log out of the current account."""
    AccountService(ctx.obj["repository"]).logout()
    click.echo("Logged out")


@click.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the logged-in user."""
    user = AccountService(ctx.obj["repository"]).resume_session()
    if user is None:
        click.echo("Not logged in.")
        return
    click.echo(user.username)


def register_commands(cli):
    """Register session commands with main CLI."""
    cli.add_command(register)
    cli.add_command(login)
    cli.add_command(logout)
    cli.add_command(whoami)
