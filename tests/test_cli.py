"""Tests for manview.cli."""
from __future__ import annotations

import json

import pytest

from manview import cli
from manview.manpage import Page, PageNotFoundError, PageSource

PAGE_TEXT = "NAME\n       ls - list directory contents\nSEE ALSO\n       dir(1), vdir(1)\n"


@pytest.fixture(autouse=True)
def fake_system(isolated_config, monkeypatch):
    monkeypatch.setattr(cli, "get_all_executables", lambda: ["egrep", "grep", "ls"])

    def fake_load_page(program, settings):
        if program != "ls":
            raise PageNotFoundError(program, tried_help=settings.enable_help_fallback)
        return Page("ls", PAGE_TEXT, PageSource.MAN)

    monkeypatch.setattr(cli, "load_page", fake_load_page)
    return isolated_config


def test_prints_page(capsys) -> None:
    assert cli.main(["ls"]) == 0
    assert capsys.readouterr().out == PAGE_TEXT


def test_missing_page(capsys) -> None:
    assert cli.main(["nothing"]) == 1
    assert "No manual entry for 'nothing'" in capsys.readouterr().err


def test_help_fallback_flag(capsys) -> None:
    assert cli.main(["nothing", "--help-fallback"]) == 1
    assert "--help" in capsys.readouterr().err


def test_references(capsys) -> None:
    assert cli.main(["ls", "--refs"]) == 0
    assert capsys.readouterr().out.split() == ["dir", "vdir"]


def test_spans(capsys) -> None:
    assert cli.main(["ls", "--spans"]) == 0
    out = capsys.readouterr().out
    assert "header" in out
    assert "'dir(1)'" in out


def test_json(capsys) -> None:
    assert cli.main(["ls", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["program"] == "ls"
    assert data["source"] == "man"
    assert [r["program"] for r in data["references"]] == ["dir", "vdir"]
    assert {"kind": "header", "start": 0, "end": 4} in data["spans"]


def test_search_in_page(capsys) -> None:
    assert cli.main(["ls", "-s", "DIR"]) == 0
    out = capsys.readouterr().out
    assert "2:" in out
    assert "4:" in out


def test_list(capsys) -> None:
    assert cli.main(["--list", "-s", "gr"]) == 0
    out = capsys.readouterr().out.split()
    assert out == ["egrep", "grep"]


def test_jump(capsys) -> None:
    assert cli.main(["--list", "--jump", "GR"]) == 0
    assert capsys.readouterr().out.strip() == "grep"


def test_jump_without_match(capsys) -> None:
    assert cli.main(["--jump", "zz"]) == 1


def test_favorites(capsys, fake_system) -> None:
    assert cli.main(["ls", "--favorite"]) == 0
    assert "added to" in capsys.readouterr().out
    assert (fake_system / "favorites.json").exists()

    assert cli.main(["--favorites"]) == 0
    assert capsys.readouterr().out.strip() == "★  ls"


def test_notes(capsys, fake_system) -> None:
    assert cli.main(["ls", "--note", "use -la"]) == 0
    assert (fake_system / "notes" / "ls.txt").read_text() == "use -la"

    assert cli.main(["ls", "--show-note"]) == 0
    assert capsys.readouterr().out.endswith("use -la\n")

    assert cli.main(["--list"]) == 0
    assert " ✎ ls" in capsys.readouterr().out

    assert cli.main(["ls", "--note", ""]) == 0
    assert cli.main(["ls", "--show-note"]) == 1


@pytest.mark.parametrize(
    "name, content",
    [
        ("settings.conf", b"EnableHelpFallback=true\n\xff\xfe\n"),
        ("favorites.json", b'{"favorites": 5}'),
    ],
)
def test_unreadable_store_files_do_not_stop_startup(capsys, fake_system, name, content) -> None:
    (fake_system / name).write_bytes(content)
    assert cli.main(["--list"]) == 0
    assert capsys.readouterr().out.split() == ["egrep", "grep", "ls"]
