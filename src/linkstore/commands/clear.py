"""Command: remove every link for a user."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkstore.commands._base import USER_ID, LinkCommand

if TYPE_CHECKING:
    from linkstore.commands._context import AppContext


@click.command(cls=LinkCommand, examples="  linkstore clear 42")
@click.argument("user_id", type=USER_ID)
@click.pass_obj
def clear(app: AppContext, user_id: int) -> None:
    """Delete all links stored for USER_ID."""
    app.emit(app.service.clear(user_id))
