"""Tests for the explorer CLI."""
import json
import pytest
import explorer
from book_search.errors import ServerError


def test_search_mock_json(capsys):
    """--mock --format json prints the normalized records."""
    explorer.main(["search", "anything", "--mock", "--format", "json"])

    records = json.loads(capsys.readouterr().out)
    assert len(records) == 1
    assert records[0]["isbn"] == "9784873115658"
    assert records[0]["language"] == "ja"


def test_search_mock_async_compact(capsys):
    """The async path prints the same book."""
    explorer.main(["search", "anything", "--mock", "--async", "--format", "compact"])

    out = capsys.readouterr().out
    assert out.strip() == "1. リーダブルコード - DustinBoswell,TrevorFoucher (9784873115658)"


def test_search_mock_table(capsys):
    """The table lists the ISBN."""
    explorer.main(["search", "anything", "--mock"])

    assert "9784873115658" in capsys.readouterr().out


def test_search_server_error_exits(monkeypatch):
    """ServerError ends the CLI with status 1."""
    def failing_search(args, config):
        raise ServerError()

    monkeypatch.setattr(explorer, "search_books_sync", failing_search)

    with pytest.raises(SystemExit) as excinfo:
        explorer.main(["search", "python"])

    assert excinfo.value.code == 1


def test_no_command_exits():
    """Running without a command prints help and exits 1."""
    with pytest.raises(SystemExit) as excinfo:
        explorer.main([])

    assert excinfo.value.code == 1
