"""Tests for the linkstore CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from linkstore.cli import cli


def _invoke(runner: CliRunner, db_url: str, *args: str):
    return runner.invoke(cli, ["--json", "--database-url", db_url, *args])


@pytest.mark.usefixtures("_isolated_cwd")
class TestLinkCommands:
    def test_init_then_add_and_list(self, cli_runner: CliRunner, db_url: str) -> None:
        assert _invoke(cli_runner, db_url, "init").exit_code == 0

        result = _invoke(cli_runner, db_url, "add", "42", "http://x.com")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"] == {"user_id": 42, "link": "http://x.com"}

        listing = json.loads(_invoke(cli_runner, db_url, "list", "42").output)
        assert listing["data"]["count"] == 1
        assert listing["data"]["items"] == [{"user_id": 42, "link": "http://x.com"}]

    def test_end_to_end_scenario(self, cli_runner: CliRunner, db_url: str) -> None:
        _invoke(cli_runner, db_url, "init")
        _invoke(cli_runner, db_url, "add", "42", "http://x.com")
        _invoke(cli_runner, db_url, "add", "42", "http://y.com")
        _invoke(cli_runner, db_url, "add", "7", "http://x.com")

        exists = json.loads(_invoke(cli_runner, db_url, "exists", "42", "http://y.com").output)
        assert exists["data"]["exists"] is True
        absent = _invoke(cli_runner, db_url, "exists", "7", "http://y.com")
        assert absent.exit_code == 0
        assert json.loads(absent.output)["data"]["exists"] is False

        assert _invoke(cli_runner, db_url, "clear", "42").exit_code == 0
        assert json.loads(_invoke(cli_runner, db_url, "list", "42").output)["data"]["count"] == 0
        assert json.loads(_invoke(cli_runner, db_url, "list", "7").output)["data"]["count"] == 1

    def test_list_all_and_filter(self, cli_runner: CliRunner, db_url: str) -> None:
        _invoke(cli_runner, db_url, "init")
        _invoke(cli_runner, db_url, "add", "1", "a")
        _invoke(cli_runner, db_url, "add", "1", "b")
        _invoke(cli_runner, db_url, "add", "2", "a")

        everything = json.loads(_invoke(cli_runner, db_url, "list").output)
        assert everything["data"]["count"] == 3

        filtered = json.loads(_invoke(cli_runner, db_url, "list", "1", "--link", "a").output)
        assert filtered["data"]["items"] == [{"user_id": 1, "link": "a"}]

    def test_delete_subset(self, cli_runner: CliRunner, db_url: str) -> None:
        _invoke(cli_runner, db_url, "init")
        for text in ("a", "b", "c"):
            _invoke(cli_runner, db_url, "add", "1", text)

        result = _invoke(cli_runner, db_url, "delete", "1", "a", "c")
        assert result.exit_code == 0
        listing = json.loads(_invoke(cli_runner, db_url, "list", "1").output)
        assert [item["link"] for item in listing["data"]["items"]] == ["b"]

    def test_quiet_list(self, cli_runner: CliRunner, db_url: str) -> None:
        _invoke(cli_runner, db_url, "init")
        _invoke(cli_runner, db_url, "add", "1", "http://x.com")
        result = cli_runner.invoke(cli, ["-q", "--database-url", db_url, "list", "1"])
        assert result.exit_code == 0
        assert result.output.strip() == "http://x.com"

    def test_database_url_from_env(
        self, cli_runner: CliRunner, db_url: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DATABASE_URL", db_url)
        assert cli_runner.invoke(cli, ["init"]).exit_code == 0
        assert cli_runner.invoke(cli, ["add", "3", "x"]).exit_code == 0
        result = cli_runner.invoke(cli, ["--json", "exists", "3", "x"])
        assert json.loads(result.output)["data"]["exists"] is True

    def test_database_url_from_toml(self, cli_runner: CliRunner, db_url: str, tmp_path: Path) -> None:
        (tmp_path / "linkstore.toml").write_text(f'database_url = "{db_url}"\n')
        assert cli_runner.invoke(cli, ["init"]).exit_code == 0
        assert cli_runner.invoke(cli, ["add", "3", "x"]).exit_code == 0


@pytest.mark.usefixtures("_isolated_cwd")
class TestCommandFailures:
    def test_missing_configuration(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "add", "1", "a"])
        assert result.exit_code == 1
        assert "CONFIGURATION_MISSING" in result.output

    def test_init_without_configuration(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "init"])
        assert result.exit_code == 1
        assert "CONFIGURATION_MISSING" in result.output

    def test_missing_database_file(self, cli_runner: CliRunner, db_url: str) -> None:
        result = _invoke(cli_runner, db_url, "list", "1")
        assert result.exit_code == 1
        assert "BACKEND_UNAVAILABLE" in result.output

    def test_negative_user_id_is_usage_error(self, cli_runner: CliRunner, db_url: str) -> None:
        result = _invoke(cli_runner, db_url, "add", "-1", "a")
        assert result.exit_code == 2

    def test_delete_requires_links(self, cli_runner: CliRunner, db_url: str) -> None:
        result = _invoke(cli_runner, db_url, "delete", "1")
        assert result.exit_code == 2


class TestHelp:
    def test_root_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("init", "add", "list", "exists", "clear", "delete"):
            assert name in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "linkstore" in result.output

    def test_examples_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add", "--examples"])
        assert result.exit_code == 0
        assert "linkstore add 42 http://x.com" in result.output
