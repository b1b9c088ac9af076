"""Tests for the links table bootstrap service."""

from __future__ import annotations

from pathlib import Path

from linkstore.infrastructure.repositories.links import LinkStore
from linkstore.services.init import init_links_database


class TestInitLinksDatabase:
    def test_creates_usable_database(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'links.db'}"
        result = init_links_database(url)
        assert result.ok is True
        assert result.op == "init"
        with LinkStore(url) as store:
            store.insert(1, "a")
            assert store.exists(1, "a") is True

    def test_idempotent(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'links.db'}"
        assert init_links_database(url).ok is True
        assert init_links_database(url).ok is True

    def test_missing_url(self) -> None:
        result = init_links_database(None)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "CONFIGURATION_MISSING"

    def test_bad_url(self) -> None:
        result = init_links_database("not a url at all")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "BACKEND_UNAVAILABLE"
