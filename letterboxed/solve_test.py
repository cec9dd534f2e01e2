import sys

import pytest
from inline_snapshot import snapshot

from letterboxed import solve
from letterboxed.test_utils import FIXTURE_BOARD, TESTDATA

DICT = str(TESTDATA / "letterboxed-words.txt")


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["solve", "--dictionary", DICT, *argv])
    solve.main()


def test_solve(monkeypatch, capsys):
    run(monkeypatch, FIXTURE_BOARD, "--all")
    assert capsys.readouterr().out == snapshot(
        """\
2 solutions with <= 5 words.
OBJECTIFY-YHUL
JUTIFY-YOB-BLECH
Best solution: OBJECTIFY-YHUL
"""
    )


def test_solve_no_solution(monkeypatch, capsys):
    with pytest.raises(SystemExit) as e:
        run(monkeypatch, FIXTURE_BOARD, "--max_words", "1")
    assert e.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("0 solutions with <= 1 words.\n")
    assert "No solution for tjo feb cuy hil" in out


def test_solve_bad_board(monkeypatch, capsys):
    with pytest.raises(SystemExit) as e:
        run(monkeypatch, "tjo feb cuy")
    assert e.value.code == 2
    assert "Expected four sides" in capsys.readouterr().err


def test_format_solution():
    assert solve.format_solution(["jutify", "yob"]) == "JUTIFY-YOB"
