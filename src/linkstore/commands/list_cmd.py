"""Command: list stored links."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkstore.commands._base import USER_ID, LinkCommand

if TYPE_CHECKING:
    from linkstore.commands._context import AppContext


@click.command(
    "list",
    cls=LinkCommand,
    examples="""\
  linkstore list 42
  linkstore list 42 --link http://x.com
  linkstore -q list""",
)
@click.argument("user_id", type=USER_ID, required=False)
@click.option("--link", default=None, help="Only links exactly equal to this text.")
@click.pass_obj
def list_cmd(app: AppContext, user_id: int | None, link: str | None) -> None:
    """List links for USER_ID, or for every user when omitted."""
    app.emit(app.service.list_links(user_id, link=link))
