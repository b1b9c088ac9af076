"""LinkService — link operations returning ServiceResult.

The store raises; this layer turns those exceptions into structured
failures and is where link operations get logged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from linkstore.domain.errors import LinkStoreError
from linkstore.infrastructure.repositories.links import LinkStore
from linkstore.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from linkstore.config.settings import LinkStoreSettings
    from linkstore.domain.links import Link

logger = logging.getLogger(__name__)


def error_result(op: str, exc: Exception) -> ServiceResult:
    """Build a failed ServiceResult from a store or argument error."""
    if isinstance(exc, LinkStoreError):
        error = ServiceError(code=exc.code, message=exc.message, detail=exc.to_detail())
    else:
        error = ServiceError(code="INVALID_ARGUMENT", message=str(exc))
    return ServiceResult(ok=False, op=op, error=error)


def _serialize(records: Sequence[Link]) -> list[dict[str, object]]:
    return [{"user_id": r.user_id, "link": r.link} for r in records]


class LinkService:
    """Add, list, check and remove a user's links."""

    def __init__(self, store: LinkStore) -> None:
        self._store = store

    @classmethod
    def from_settings(cls, settings: LinkStoreSettings) -> LinkService:
        """Build a service over a store configured from *settings*.

        Raises:
            ConfigurationMissing: If *settings* carries no database URL.
            BackendUnavailable: If no driver understands the URL.
        """
        return cls(LinkStore(settings.database_url, echo=settings.echo))

    @property
    def store(self) -> LinkStore:
        return self._store

    def _fail(self, op: str, exc: Exception) -> ServiceResult:
        result = error_result(op, exc)
        error = result.error
        if error is not None:
            logger.warning(
                "%s failed: %s",
                op,
                error.message,
                extra={"op": op, "code": error.code, **error.detail},
            )
        return result

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(self, user_id: int, link: str) -> ServiceResult:
        """Store *link* for *user_id*."""
        op = "add_link"
        try:
            self._store.insert(user_id, link)
        except (LinkStoreError, ValueError) as exc:
            return self._fail(op, exc)
        logger.debug("Added link for user %s", user_id, extra={"op": op})
        return ServiceResult(ok=True, op=op, data={"user_id": user_id, "link": link})

    def list_links(self, user_id: int | None = None, *, link: str | None = None) -> ServiceResult:
        """List links for *user_id* (optionally equal to *link*), or for everyone.

        Passing *link* without *user_id* is rejected: the filter only
        exists in combination with a user.
        """
        op = "list_links"
        if user_id is None and link is not None:
            return self._fail(op, ValueError("A link filter requires a user_id"))
        try:
            if user_id is None:
                records = self._store.query_all()
            else:
                records = self._store.query(user_id, link)
        except (LinkStoreError, ValueError) as exc:
            return self._fail(op, exc)

        data: dict[str, object] = {"count": len(records), "items": _serialize(records)}
        if user_id is not None:
            data = {"user_id": user_id, **data}
        logger.debug("Listed %d links", len(records), extra={"op": op})
        return ServiceResult(ok=True, op=op, data=data)

    def exists(self, user_id: int, link: str) -> ServiceResult:
        """Report whether *user_id* has *link* stored."""
        op = "link_exists"
        try:
            found = self._store.exists(user_id, link)
        except (LinkStoreError, ValueError) as exc:
            return self._fail(op, exc)
        return ServiceResult(
            ok=True, op=op, data={"user_id": user_id, "link": link, "exists": found}
        )

    def clear(self, user_id: int) -> ServiceResult:
        """Remove every link stored for *user_id*."""
        op = "clear_links"
        try:
            self._store.clear_all(user_id)
        except (LinkStoreError, ValueError) as exc:
            return self._fail(op, exc)
        logger.debug("Cleared links for user %s", user_id, extra={"op": op})
        return ServiceResult(ok=True, op=op, data={"user_id": user_id})

    def delete(self, user_id: int, links: Sequence[str]) -> ServiceResult:
        """Remove the given links for *user_id*, one statement per link.

        A batch that fails partway reports the confirmed deletions in
        ``error.detail["deleted"]`` and the rest in ``["pending"]``.
        """
        op = "delete_links"
        try:
            self._store.delete_many(user_id, links)
        except (LinkStoreError, ValueError, TypeError) as exc:
            return self._fail(op, exc)
        logger.debug("Deleted %d links for user %s", len(links), user_id, extra={"op": op})
        return ServiceResult(ok=True, op=op, data={"user_id": user_id, "deleted": list(links)})
