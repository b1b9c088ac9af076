"""Root CLI group for linkstore with global flags and command registration."""

from __future__ import annotations

import click

from linkstore import __version__
from linkstore.commands import register_commands
from linkstore.commands._context import AppContext
from linkstore.config.settings import LinkStoreSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="linkstore")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--database-url",
    default=None,
    help="SQLAlchemy URL of the link database (default: $DATABASE_URL).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    database_url: str | None,
) -> None:
    """linkstore — per-user link storage."""
    ctx.ensure_object(dict)
    settings = LinkStoreSettings.from_cli(
        config_path=config_path,
        database_url=database_url,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
