"""End-to-end runs of the console entry point."""

import io
from pathlib import Path

import pytest

from detective import main


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    monkeypatch.setenv("DETECTIVE_LOG_LEVEL", "CRITICAL")
    monkeypatch.delenv("DETECTIVE_LOG_FILE", raising=False)
    monkeypatch.delenv("DETECTIVE_JSON_LOGS", raising=False)
    monkeypatch.delenv("DETECTIVE_CASE_FILE", raising=False)
    monkeypatch.delenv("DETECTIVE_MAX_CLUES", raising=False)


def test_main_plays_a_session(monkeypatch, capsys):
    """A full run ends with the farewell line."""
    monkeypatch.setattr("sys.stdin", io.StringIO("d\nd\nd\ns\nSr. Black\n"))
    main()
    out = capsys.readouterr().out
    assert "Accusation sustained!" in out
    assert out.rstrip().endswith("Thanks for playing Detective Quest!")


def test_main_reports_bad_case_file(monkeypatch, capsys, tmp_path: Path):
    """An unreadable case file is reported, not raised."""
    bad = tmp_path / "broken.dat"
    bad.write_text("9\n-1\n0\n", encoding="utf-8")
    monkeypatch.setenv("DETECTIVE_CASE_FILE", str(bad))
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main()
    assert "Could not load the case" in capsys.readouterr().err


def test_main_reports_exhausted_ledger(monkeypatch, capsys):
    """A full ledger ends the session with a message."""
    monkeypatch.setenv("DETECTIVE_MAX_CLUES", "1")
    monkeypatch.setattr("sys.stdin", io.StringIO("e\ns\nSr. Black\n"))
    main()
    out = capsys.readouterr().out
    assert "ran out of room" in out
    assert "Thanks for playing" in out


@pytest.mark.parametrize("value", ["ten", "-1"])
def test_main_reports_bad_clue_limit(monkeypatch, capsys, value):
    """An unusable clue limit is reported before the game starts."""
    monkeypatch.setenv("DETECTIVE_MAX_CLUES", value)
    monkeypatch.setattr("sys.stdin", io.StringIO("s\nSr. Black\n"))
    main()
    captured = capsys.readouterr()
    assert "Invalid configuration" in captured.err
    assert "Thanks for playing" not in captured.out


def test_main_reports_undecodable_case_file(monkeypatch, capsys, tmp_path: Path):
    """A case file that is not UTF-8 is reported, not raised."""
    bad = tmp_path / "latin.dat"
    bad.write_bytes(b"1\n1\tHall\t\xff\xfe\n-1\n0\n")
    monkeypatch.setenv("DETECTIVE_CASE_FILE", str(bad))
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main()
    assert "Could not load the case" in capsys.readouterr().err
