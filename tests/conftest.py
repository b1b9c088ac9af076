"""Shared pytest fixtures and test helpers for linkstore tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy import text
from sqlalchemy.engine import Engine

from linkstore.infrastructure.database.engine import init_database
from linkstore.infrastructure.repositories.links import LinkStore


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's database and config variables out of every test."""
    for name in ("DATABASE_URL", "LINKSTORE_DATABASE_URL", "LINKSTORE_CONFIG", "LINKSTORE_ECHO"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_logger = logging.getLogger("linkstore")
    app_level = app_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app_logger.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    """URL of an SQLite file inside the test's temp directory (not created)."""
    return f"sqlite:///{tmp_path / 'links.db'}"


@pytest.fixture
def db_engine(db_url: str) -> Generator[Engine]:
    """Initialized SQLite engine with the links table created."""
    engine = init_database(db_url)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(db_engine: Engine, db_url: str) -> Generator[LinkStore]:
    """LinkStore over an initialized SQLite file."""
    s = LinkStore(db_url)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in the temp directory so no stray linkstore.toml is discovered."""
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def refuse_deleting(engine: Engine, link: str) -> None:
    """Install an SQLite trigger that makes deleting *link* fail."""
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TRIGGER refuse_delete BEFORE DELETE ON links "
                f"WHEN OLD.link = '{link}' "
                "BEGIN SELECT RAISE(ABORT, 'deletion refused'); END"
            )
        )


def link_texts(store: LinkStore, user_id: int) -> list[str]:
    """Sorted link texts stored for *user_id*."""
    return sorted(record.link for record in store.query(user_id))
