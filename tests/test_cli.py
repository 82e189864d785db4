"""Tests for the Typer CLI (HTTP mocked)."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
import requests
from typer.testing import CliRunner

from conftest import FakeNoteService
from notems.presentation.cli.app import app

runner = CliRunner()

_SESSION = "notems.infrastructure.http.note_client.requests.Session"


@pytest.fixture
def cli_service():
    service = FakeNoteService(initial="remote text")
    with patch(_SESSION, return_value=service):
        yield service


class TestGet:
    def test_prints_content(self, cli_service):
        result = runner.invoke(app, ["get", "testid"])
        assert result.exit_code == 0
        assert "remote text" in result.stdout

    def test_raw_prints_bare_text(self, cli_service):
        cli_service.stored = "a [bold]b[/bold] <c>"
        result = runner.invoke(app, ["get", "testid", "--raw"])
        assert result.exit_code == 0
        assert result.stdout == "a [bold]b[/bold] <c>"

    def test_parse_error_exits_1(self, cli_service):
        cli_service.page_without_marker = True
        result = runner.invoke(app, ["get", "testid"])
        assert result.exit_code == 1

    def test_network_error_exits_1(self, cli_service):
        cli_service.get_error = requests.ConnectionError("offline")
        result = runner.invoke(app, ["get", "testid"])
        assert result.exit_code == 1
        assert "offline" in result.stdout

    def test_bracketed_slot_shown_literally(self, cli_service):
        result = runner.invoke(app, ["get", "x[red]"])
        assert result.exit_code == 0
        assert "note.ms/x[red]" in result.stdout

    def test_invalid_slot_exits_1(self, cli_service):
        result = runner.invoke(app, ["get", "a?b"])
        assert result.exit_code == 1
        assert cli_service.get_calls == []


class TestSave:
    def test_replace(self, cli_service):
        result = runner.invoke(app, ["save", "testid", "fresh"])
        assert result.exit_code == 0
        assert cli_service.stored == "fresh"

    def test_bracketed_slot_shown_literally(self, cli_service):
        result = runner.invoke(app, ["save", "a[b]", "fresh"])
        assert result.exit_code == 0
        assert "note.ms/a[b]" in result.stdout

    def test_append_flag(self, cli_service):
        result = runner.invoke(app, ["save", "testid", "more", "--append", "-s", " | "])
        assert result.exit_code == 0
        assert cli_service.stored == "remote text | more"

    def test_reads_stdin(self, cli_service):
        result = runner.invoke(app, ["save", "testid", "-"], input="from stdin\n")
        assert result.exit_code == 0
        assert cli_service.stored == "from stdin\n"

    def test_rejected_exits_1_and_shows_status(self, cli_service):
        cli_service.post_status = 403
        result = runner.invoke(app, ["save", "testid", "x"])
        assert result.exit_code == 1
        assert "403" in result.stdout

    def test_append_command(self, cli_service):
        result = runner.invoke(app, ["append", "testid", "next"])
        assert result.exit_code == 0
        assert cli_service.stored == "remote text\nnext"

    def test_append_aborts_on_read_failure(self, cli_service):
        cli_service.page_without_marker = True
        result = runner.invoke(app, ["append", "testid", "next"])
        assert result.exit_code == 1
        assert cli_service.post_calls == []


class TestDemo:
    def test_runs_all_steps(self, cli_service):
        result = runner.invoke(app, ["demo", "testid"])
        assert result.exit_code == 0
        assert len(cli_service.post_calls) == 3

    def test_failure_exits_1(self, cli_service):
        cli_service.post_status = 500
        result = runner.invoke(app, ["demo", "testid"])
        assert result.exit_code == 1


class TestConfigShow:
    def test_default(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "note.ms" in result.stdout

    def test_custom_file(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"base_url": "http://localhost:1234"}), encoding="utf-8")
        result = runner.invoke(app, ["config", "show", "--config", str(path)])
        assert result.exit_code == 0
        assert "localhost" in result.stdout

    def test_missing_file_exits_1(self, tmp_path):
        result = runner.invoke(app, ["config", "show", "-c", str(tmp_path / "nope.json")])
        assert result.exit_code == 1


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "get" in result.output
