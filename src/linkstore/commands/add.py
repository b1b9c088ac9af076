"""Command: store a link for a user."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkstore.commands._base import USER_ID, LinkCommand

if TYPE_CHECKING:
    from linkstore.commands._context import AppContext


@click.command(
    cls=LinkCommand,
    examples="""\
  linkstore add 42 http://x.com
  linkstore --json add 7 "free-form note" """,
)
@click.argument("user_id", type=USER_ID)
@click.argument("link")
@click.pass_obj
def add(app: AppContext, user_id: int, link: str) -> None:
    """Store LINK for USER_ID (duplicates are kept)."""
    app.emit(app.service.add(user_id, link))
