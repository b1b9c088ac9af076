"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``LINKSTORE_*`` prefix, plus plain ``DATABASE_URL``
  3. TOML file    — ``linkstore.toml`` discovered via walk-up
  4. Code defaults

Resolved once at process start and frozen; the database URL is then
handed to :class:`~linkstore.infrastructure.repositories.links.LinkStore`
explicitly rather than read from the environment by the store.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from linkstore.config.discovery import find_config

PLAIN_DATABASE_URL_VAR = "DATABASE_URL"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``linkstore.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


class PlainDatabaseUrlSource(PydanticBaseSettingsSource):
    """Read the unprefixed ``DATABASE_URL`` variable.

    Sits below ``LINKSTORE_DATABASE_URL`` and above the TOML file.
    """

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        if field_name != "database_url":
            return None, field_name, False
        return os.environ.get(PLAIN_DATABASE_URL_VAR), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return ``database_url`` when the plain variable is set and non-empty."""
        val = os.environ.get(PLAIN_DATABASE_URL_VAR)
        return {"database_url": val} if val else {}


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class LinkStoreSettings(BaseSettings):
    """Settings for the linkstore CLI and services.

    Attributes:
        database_url: SQLAlchemy URL of the link backend, or None when
            nothing configured one. Also read from ``DATABASE_URL``.
        echo: Echo every SQL statement through the ``sqlalchemy`` logger.
        config_path: The ``linkstore.toml`` that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "LINKSTORE_",
    }

    database_url: str | None = None
    echo: bool = False
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert plain DATABASE_URL and TOML sources between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            PlainDatabaseUrlSource(settings_cls),
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> LinkStoreSettings:
        """Construct settings from a CLI invocation.

        Discovers ``linkstore.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides. Flags passed as None are dropped so they do not mask
        lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
