"""Command: check whether a user has a link."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkstore.commands._base import USER_ID, LinkCommand

if TYPE_CHECKING:
    from linkstore.commands._context import AppContext


@click.command(
    cls=LinkCommand,
    examples="""\
  linkstore exists 42 http://x.com
  linkstore --json exists 7 http://y.com""",
)
@click.argument("user_id", type=USER_ID)
@click.argument("link")
@click.pass_obj
def exists(app: AppContext, user_id: int, link: str) -> None:
    """Report whether USER_ID has LINK stored (exit 0 either way)."""
    app.emit(app.service.exists(user_id, link))
