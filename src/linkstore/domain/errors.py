"""Error taxonomy for link store operations.

Every failure carries the user it concerned (``None`` for unscoped calls),
the statement intent and the backend's own message, so a caller can
diagnose it without the original traceback. The driver exception stays
reachable through ``__cause__``.
"""

from __future__ import annotations


class LinkStoreError(Exception):
    """Base class for all link store failures."""

    code = "LINK_STORE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        user_id: int | None = None,
        intent: str | None = None,
        backend_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.user_id = user_id
        self.intent = intent
        self.backend_message = backend_message

    def to_detail(self) -> dict[str, object]:
        """Structured fields for error payloads and log events."""
        detail: dict[str, object] = {"intent": self.intent}
        if self.user_id is not None:
            detail["user_id"] = self.user_id
        if self.backend_message:
            detail["backend_message"] = self.backend_message
        return detail


class ConfigurationMissing(LinkStoreError):
    """No backend location was supplied."""

    code = "CONFIGURATION_MISSING"


class BackendUnavailable(LinkStoreError):
    """The backend could not be reached or its location does not exist."""

    code = "BACKEND_UNAVAILABLE"


class StatementError(LinkStoreError):
    """The backend rejected a statement."""

    code = "STATEMENT_ERROR"


class PartialBatchFailure(LinkStoreError):
    """A bulk deletion stopped after some items were already committed.

    Attributes:
        deleted: Links whose deletion statement completed, in input order.
        pending: The failing link followed by every link never attempted.
        cause: The :class:`BackendUnavailable` or :class:`StatementError`
            that stopped the batch.
    """

    code = "PARTIAL_BATCH_FAILURE"

    def __init__(
        self,
        *,
        user_id: int,
        deleted: list[str],
        pending: list[str],
        cause: LinkStoreError,
    ) -> None:
        message = (
            f"Deleted {len(deleted)} of {len(deleted) + len(pending)} links "
            f"for user {user_id} before failing: {cause.message}"
        )
        super().__init__(
            message,
            user_id=user_id,
            intent=cause.intent,
            backend_message=cause.backend_message,
        )
        self.deleted = deleted
        self.pending = pending
        self.cause = cause

    def to_detail(self) -> dict[str, object]:
        detail = super().to_detail()
        detail["deleted"] = list(self.deleted)
        detail["pending"] = list(self.pending)
        detail["cause"] = self.cause.code
        return detail
