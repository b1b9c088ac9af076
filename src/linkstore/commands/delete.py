"""Command: remove specific links for a user."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkstore.commands._base import USER_ID, LinkCommand

if TYPE_CHECKING:
    from linkstore.commands._context import AppContext


@click.command(
    cls=LinkCommand,
    examples="""\
  linkstore delete 42 http://x.com
  linkstore delete 42 http://x.com http://y.com""",
)
@click.argument("user_id", type=USER_ID)
@click.argument("links", nargs=-1, required=True)
@click.pass_obj
def delete(app: AppContext, user_id: int, links: tuple[str, ...]) -> None:
    """Delete each of LINKS for USER_ID.

    Links are deleted one at a time; if one fails, the ones before it
    stay deleted and the error lists what was not.
    """
    app.emit(app.service.delete(user_id, list(links)))
