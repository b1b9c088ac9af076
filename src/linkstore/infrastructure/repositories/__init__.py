"""Repositories encapsulating the SQL issued against the backend."""

from linkstore.infrastructure.repositories.links import LinkStore

__all__ = ["LinkStore"]
