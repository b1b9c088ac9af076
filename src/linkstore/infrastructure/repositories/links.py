"""LinkStore — create/read/delete access to per-user link records.

Each public method checks out one connection, issues its statement(s)
and releases the connection on every exit path. Driver failures are
translated into the :mod:`linkstore.domain.errors` taxonomy; nothing is
retried, suppressed or logged here.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import ArgumentError, DBAPIError, SQLAlchemyError

from linkstore.domain.errors import (
    BackendUnavailable,
    ConfigurationMissing,
    LinkStoreError,
    PartialBatchFailure,
    StatementError,
)
from linkstore.domain.links import Link, links_from_rows, validate_user_id
from linkstore.infrastructure.database.engine import create_db_engine, sqlite_file_path
from linkstore.infrastructure.database.schema import links

if TYPE_CHECKING:
    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine
    from sqlalchemy.sql import Executable


def _driver_message(exc: BaseException) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


class LinkStore:
    """Per-user link persistence over a SQLAlchemy engine.

    Construction is fallible: a missing URL raises
    :class:`ConfigurationMissing` and a URL no driver understands raises
    :class:`BackendUnavailable`. Pass *engine* to run against an engine
    the caller already owns (an in-memory database shared with a schema
    bootstrap, for instance).

    Usage::

        store = LinkStore("sqlite:///links.db")
        store.insert(42, "http://x.com")
        assert store.exists(42, "http://x.com")
    """

    def __init__(
        self,
        database_url: str | None = None,
        *,
        echo: bool = False,
        engine: Engine | None = None,
    ) -> None:
        if engine is None:
            if database_url is None or not database_url.strip():
                msg = "No database URL configured (set DATABASE_URL or --database-url)"
                raise ConfigurationMissing(msg, intent="configure")
            try:
                engine = create_db_engine(database_url, echo=echo)
            except (ArgumentError, ImportError) as exc:
                msg = f"Cannot create a backend for {database_url!r}"
                raise BackendUnavailable(
                    msg, intent="configure", backend_message=str(exc)
                ) from exc
        self._engine = engine
        self._db_path = sqlite_file_path(engine.url)

    @property
    def engine(self) -> Engine:
        return self._engine

    def close(self) -> None:
        """Release any pooled connections held by the engine."""
        self._engine.dispose()

    def __enter__(self) -> LinkStore:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def insert(self, user_id: int, link: str) -> None:
        """Append one link record for *user_id*. Duplicates are kept."""
        validate_user_id(user_id)
        stmt = insert(links).values(user_id=user_id, link=link)
        with self._connection("insert", user_id) as conn:
            self._write(conn, stmt, "insert", user_id)

    def query(self, user_id: int, link: str | None = None) -> list[Link]:
        """Return every record for *user_id*, or only those equal to *link*.

        Matching is exact string equality. An empty list is a valid result.
        """
        validate_user_id(user_id)
        stmt = select(links.c.user_id, links.c.link).where(links.c.user_id == user_id)
        if link is not None:
            stmt = stmt.where(links.c.link == link)
        with self._connection("query", user_id) as conn:
            return self._read(conn, stmt, "query", user_id)

    def query_all(self) -> list[Link]:
        """Return every record for every user."""
        stmt = select(links.c.user_id, links.c.link)
        with self._connection("query_all", None) as conn:
            return self._read(conn, stmt, "query_all", None)

    def exists(self, user_id: int, link: str) -> bool:
        """True if *user_id* has at least one record equal to *link*."""
        return len(self.query(user_id, link)) > 0

    def clear_all(self, user_id: int) -> None:
        """Delete every record for *user_id*. A user with none is a no-op."""
        validate_user_id(user_id)
        stmt = delete(links).where(links.c.user_id == user_id)
        with self._connection("clear_all", user_id) as conn:
            self._write(conn, stmt, "clear_all", user_id)

    def delete_many(self, user_id: int, links_to_delete: Iterable[str]) -> None:
        """Delete the records matching each ``(user_id, link)`` pair.

        Every item is its own committed statement; there is no enclosing
        transaction. If an item fails after earlier ones were applied,
        :class:`PartialBatchFailure` reports which links were deleted and
        which were not. If the first item fails, its error is raised as is.

        Raises:
            TypeError: If *links_to_delete* is a single string.
        """
        validate_user_id(user_id)
        if isinstance(links_to_delete, str):
            msg = "links_to_delete must be an iterable of strings, not a string"
            raise TypeError(msg)
        batch = list(links_to_delete)
        if not batch:
            return

        deleted: list[str] = []
        try:
            with self._connection("delete_many", user_id) as conn:
                for link in batch:
                    stmt = delete(links).where(
                        links.c.user_id == user_id, links.c.link == link
                    )
                    self._write(conn, stmt, "delete_many", user_id)
                    deleted.append(link)
        except LinkStoreError as exc:
            if not deleted:
                raise
            raise PartialBatchFailure(
                user_id=user_id,
                deleted=deleted,
                pending=batch[len(deleted) :],
                cause=exc,
            ) from exc

    # ------------------------------------------------------------------
    # Connection and statement plumbing
    # ------------------------------------------------------------------

    @contextmanager
    def _connection(self, intent: str, user_id: int | None) -> Iterator[Connection]:
        """Check out a connection, translating connect failures."""
        if self._db_path is not None and not self._db_path.is_file():
            msg = f"Database file does not exist: {self._db_path}"
            raise BackendUnavailable(msg, user_id=user_id, intent=intent)
        try:
            conn = self._engine.connect()
        except SQLAlchemyError as exc:
            msg = f"Cannot connect to the backend for {intent}"
            raise BackendUnavailable(
                msg, user_id=user_id, intent=intent, backend_message=_driver_message(exc)
            ) from exc
        with conn:
            yield conn

    def _statement_failure(
        self, exc: Exception, intent: str, user_id: int | None
    ) -> LinkStoreError:
        if isinstance(exc, DBAPIError) and exc.connection_invalidated:
            return BackendUnavailable(
                f"Lost the backend connection during {intent}",
                user_id=user_id,
                intent=intent,
                backend_message=_driver_message(exc),
            )
        return StatementError(
            f"Backend rejected the {intent} statement",
            user_id=user_id,
            intent=intent,
            backend_message=_driver_message(exc),
        )

    def _write(
        self, conn: Connection, stmt: Executable, intent: str, user_id: int | None
    ) -> None:
        try:
            with conn.begin():
                conn.execute(stmt)
        except (SQLAlchemyError, OverflowError) as exc:
            raise self._statement_failure(exc, intent, user_id) from exc

    def _read(
        self, conn: Connection, stmt: Executable, intent: str, user_id: int | None
    ) -> list[Link]:
        try:
            rows = conn.execute(stmt).all()
        except (SQLAlchemyError, OverflowError) as exc:
            raise self._statement_failure(exc, intent, user_id) from exc
        try:
            return links_from_rows(rows)
        except ValueError as exc:
            raise StatementError(
                f"Stored rows do not match the links schema during {intent}",
                user_id=user_id,
                intent=intent,
                backend_message=str(exc),
            ) from exc
