"""Smoke tests for the terminal loop and console view."""

from connect4_minimax.config import SessionConfig
from connect4_minimax.game.controller import run_game
from connect4_minimax.game.session import GameSession
from connect4_minimax.ui.render import ConsoleView


def feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_run_game_plays_and_quits(monkeypatch, capsys):
    session = GameSession(SessionConfig(difficulty=1))
    view = ConsoleView()
    feed(monkeypatch, ["9", "4", "q"])

    run_game(session, view, show_thinking=False)

    assert session.board.piece_count() == 2
    assert session.board.grid[5][3] == "X"
    assert "AI chose" in view.diagnostics
    assert view.status == "Game quit."
    assert "CONNECT 4" in capsys.readouterr().out


def test_run_game_reset_command(monkeypatch):
    session = GameSession(SessionConfig(difficulty=1))
    view = ConsoleView()
    feed(monkeypatch, ["1", "r", "q"])

    run_game(session, view, show_thinking=False)

    assert session.board.piece_count() == 0
    assert view.diagnostics == ""
    assert view in session.observers
