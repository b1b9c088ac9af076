"""Command: create the links table in the configured database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkstore.commands._base import LinkCommand

if TYPE_CHECKING:
    from linkstore.commands._context import AppContext


@click.command(
    "init",
    cls=LinkCommand,
    examples="""\
  linkstore --database-url sqlite:///links.db init
  DATABASE_URL=sqlite:///links.db linkstore init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the links table if it does not exist (idempotent)."""
    from linkstore.services.init import init_links_database

    app.emit(init_links_database(app.settings.database_url, echo=app.settings.echo))
