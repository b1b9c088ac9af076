"""Subcommand modules for linkstore.

Provides register_commands() which uses deferred imports to keep
``linkstore --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from linkstore.commands.add import add
    from linkstore.commands.clear import clear
    from linkstore.commands.delete import delete
    from linkstore.commands.exists import exists
    from linkstore.commands.init_cmd import init_cmd
    from linkstore.commands.list_cmd import list_cmd

    cli.add_command(init_cmd)
    cli.add_command(add)
    cli.add_command(list_cmd)
    cli.add_command(exists)
    cli.add_command(clear)
    cli.add_command(delete)
