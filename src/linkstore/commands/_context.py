"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linkstore.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from linkstore.config.settings import LinkStoreSettings
    from linkstore.services.links import LinkService
    from linkstore.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The link service is built on first use so ``--help`` and
    ``--version`` never need a configured database.
    """

    def __init__(self, settings: LinkStoreSettings) -> None:
        self.settings = settings
        self._service: LinkService | None = None

        from linkstore.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> LinkService:
        """The link service. Emits a failure and exits if the store can't be built."""
        if self._service is None:
            from linkstore.domain.errors import LinkStoreError
            from linkstore.services.links import LinkService, error_result

            try:
                self._service = LinkService.from_settings(self.settings)
            except LinkStoreError as exc:
                self.emit(error_result("configure", exc))
        return self._service  # type: ignore[return-value]

    def close(self) -> None:
        if self._service is not None:
            self._service.store.close()
            self._service = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
