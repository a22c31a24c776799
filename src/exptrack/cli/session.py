"""CLI helpers for resolving the logged-in user."""

from __future__ import annotations

import click
from exptrack.domain.account import AccountService
from exptrack.domain.entities import User


def require_user(ctx: click.Context) -> User:
    """Return the user of the stored session, or exit with a CLI error."""
    user = AccountService(ctx.obj["repository"]).resume_session()
    if user is None:
        click.echo("Error: Not logged in. Run 'exptrack login' first.", err=True)
        ctx.exit(1)
    return user
