"""Database engine setup.

The backend is whatever a SQLAlchemy URL points at: an SQLite file, an
in-memory SQLite database, or a networked server. SQLAlchemy Core (not
ORM) is used because every operation is a single statement with no
object graph to track.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine, make_url

from linkstore.infrastructure.database.schema import metadata


def sqlite_file_path(url: str | URL) -> Path | None:
    """Return the database file behind an SQLite *url*.

    Returns None for non-SQLite backends, in-memory databases and
    ``file:`` URIs, where the driver alone decides what the location means.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return None
    database = parsed.database
    if not database or database == ":memory:" or database.startswith("file:"):
        return None
    return Path(database)


def create_db_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an engine for *url*, enabling WAL mode for SQLite files.

    Raises whatever SQLAlchemy raises for an unparseable URL or an
    unknown or uninstalled driver; callers translate those.
    """
    engine = create_engine(url, echo=echo)

    if sqlite_file_path(url) is not None:

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine


def init_database(url: str | URL, *, echo: bool = False) -> Engine:
    """Create the ``links`` table at *url* if it does not exist yet.

    For SQLite files the parent directory is created first. Idempotent:
    safe to call against an already initialized database.

    Returns the engine ready for use.
    """
    db_path = sqlite_file_path(url)
    if db_path is not None:
        db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(url, echo=echo)
    metadata.create_all(engine)
    return engine
