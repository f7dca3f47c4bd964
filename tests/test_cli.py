import io
import sys

import pytest

from rushsolve.cli import main, replay
from rushsolve.parser import parse_config_text
from rushsolve.search import Move

TWO_MOVES = "3 3\n1\n...\n..A\nPPAK\n"
BLOCKED = "3 3\n1\n..A\n..A\nPPAK\n"


def _puzzle(tmp_path, text, name="puzzle.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_usage_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_usage_with_too_many_arguments(capsys):
    assert main(["a.txt", "b.txt"]) == 1
    assert "<config_file>" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Cannot open" in capsys.readouterr().out


def test_full_run_writes_solution(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = _puzzle(tmp_path, TWO_MOVES)
    monkeypatch.setattr(sys, "stdin", io.StringIO("9\n3\n"))

    assert main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "Invalid choice. Please try again." in out
    saved = (tmp_path / "test" / "solutions" / "puzzle.txt").read_text(encoding="utf-8")
    assert "Choice: 9\n" in saved
    assert "Choice: 3\n" in saved
    assert "Move 1: A-up\n" in saved
    assert "Move 2: P-right\n" in saved
    assert "Nodes visited:" in saved
    assert "Execution time:" in saved
    assert "\033[" not in saved
    assert "\033[31m" in out


def test_no_solution(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = _puzzle(tmp_path, BLOCKED)
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n"))
    assert main([str(path)]) == 0
    assert "No solution found :(" in capsys.readouterr().out


def test_end_of_input_stops(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _puzzle(tmp_path, TWO_MOVES)
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([str(path)]) == 1


def test_replay_steps():
    initial = parse_config_text(TWO_MOVES)
    steps = replay(initial, [Move("A", -1), Move("P", 1)])
    assert [direction for _, direction, _ in steps] == ["up", "right"]
    first_state = steps[0][2]
    assert first_state.vehicles["A"].row == initial.vehicles["A"].row - 1
    last_state = steps[-1][2]
    assert "P" not in last_state.vehicles
    assert all("P" not in row for row in last_state.grid())


def test_replay_accepts_plain_tuples():
    initial = parse_config_text(TWO_MOVES)
    steps = replay(initial, [("A", -1), ("P", 1)])
    assert [move for move, _, _ in steps] == [Move("A", -1), Move("P", 1)]


def test_replay_unknown_vehicle():
    initial = parse_config_text(TWO_MOVES)
    with pytest.raises(KeyError):
        replay(initial, [Move("Z", 1), Move("P", 1)])