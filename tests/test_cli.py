import io

import pytest

from kalah import cli


TEST_TIMEOUT_SECONDS = 120


def _run(monkeypatch, capsys, text, *argv):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = cli.main(list(argv))
    return code, capsys.readouterr().out


@pytest.mark.timeout(TEST_TIMEOUT_SECONDS)
@pytest.mark.parametrize("player", ["1", "2"])
def test_opening_prints_third_hole(monkeypatch, capsys, player):
    code, out = _run(monkeypatch, capsys, player + " 0 4 4 4 4 4 4 0 4 4 4 4 4 4")
    assert code == 0
    assert out == "3"


def test_player_two_gets_a_hole_with_marbles(monkeypatch, capsys):
    text = "2 0 0 5 5 5 5 4 0 4 4 4 4 4 4"
    code, out = _run(monkeypatch, capsys, text, "--depth", "4")
    assert code == 0
    hole = int(out) - 1
    assert 0 <= hole < 6


def test_capture_is_found_through_the_cli(monkeypatch, capsys):
    text = "1 17 1 0 0 0 0 2 17 0 9 0 0 0 2"
    code, out = _run(monkeypatch, capsys, text, "--depth", "1")
    assert code == 0
    assert out == "1"


def test_malformed_input_exits_non_zero(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1 0 4 4")
    assert code == 1
    assert out == ""


def test_terminal_input_reports_no_move(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1 20 0 0 0 0 0 0 18 1 2 0 3 0 4")
    assert code == 1
    assert out == ""


def test_invalid_depth_exits_non_zero(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1 0 4 4 4 4 4 4 0 4 4 4 4 4 4", "--depth", "0")
    assert code == 1
    assert out == ""
