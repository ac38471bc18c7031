import io

import pytest

from chesscore.board import Board
from chesscore.game import PROMPT, GameManager, main


def _run(text):
    out = io.StringIO()
    manager = GameManager(input_stream=io.StringIO(text), output_stream=out)
    return manager, manager.run(), out.getvalue()


def test_two_players():
    manager, result, output = _run("2\n")
    assert result == 2
    assert manager.players == 2
    assert output == Board().render() + PROMPT + "\n"


def test_single_player():
    _, result, _ = _run("1\n")
    assert result == 1


def test_reprompts_until_valid():
    _, result, output = _run("0\n3\n1\n")
    assert result == 1
    assert output.count(PROMPT) == 3


def test_non_numeric_answer_is_rejected():
    manager, result, output = _run("abc 2\n")
    assert result == 2
    assert output.count(PROMPT) == 2


def test_board_is_created():
    manager, _, _ = _run("2")
    assert manager.board is not None
    assert manager.board.render() == Board().render()


def test_end_of_input_raises():
    manager = GameManager(input_stream=io.StringIO("5\n"), output_stream=io.StringIO())
    with pytest.raises(EOFError):
        manager.run()


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main([]) == 0
    assert PROMPT in capsys.readouterr().out


def test_main_reports_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "number of players" in capsys.readouterr().err


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])