"""Schema bootstrap for a fresh link backend."""

from __future__ import annotations

import logging

from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from linkstore.domain.errors import BackendUnavailable, ConfigurationMissing
from linkstore.infrastructure.database.engine import init_database
from linkstore.services.links import error_result
from linkstore.services.result import ServiceResult

logger = logging.getLogger(__name__)


def init_links_database(database_url: str | None, *, echo: bool = False) -> ServiceResult:
    """Create the ``links`` table at *database_url* if it is missing.

    Idempotent. Only this bootstrap creates schema; the store assumes
    the table already exists.
    """
    op = "init"
    if database_url is None or not database_url.strip():
        exc = ConfigurationMissing(
            "No database URL configured (set DATABASE_URL or --database-url)",
            intent="init",
        )
        return error_result(op, exc)

    try:
        engine = init_database(database_url, echo=echo)
    except (ArgumentError, ImportError, SQLAlchemyError, OSError) as exc:
        failure = BackendUnavailable(
            f"Cannot initialize the backend for {database_url!r}",
            intent="init",
            backend_message=str(getattr(exc, "orig", None) or exc),
        )
        logger.warning("init failed: %s", failure.backend_message)
        return error_result(op, failure)
    engine.dispose()

    logger.debug("Initialized links table", extra={"op": op})
    return ServiceResult(ok=True, op=op, data={"database_url": database_url})
