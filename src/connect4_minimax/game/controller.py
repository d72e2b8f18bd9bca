from __future__ import annotations

from connect4_minimax.config import AI_THINK_DELAY_SEC, RANKING_TOP_N
from connect4_minimax.game.session import GameSession
from connect4_minimax.ui.effects import ai_thinking
from connect4_minimax.ui.prompts import QUIT, RESET, parse_move
from connect4_minimax.ui.render import ConsoleView


def run_game(session: GameSession, view: ConsoleView, show_thinking: bool = True) -> None:
    """
    Terminal loop for one session: read a column, play it, then let the AI
    answer after a short pause. Keeps going across games until the user
    quits.
    """
    if view not in session.observers:
        session.observers.append(view)
    session.reset()

    while True:
        view.draw(session.top(RANKING_TOP_N), session.tally)

        prompt = "Play again? (r / q): " if session.state.game_over else "Your move: "
        try:
            cmd = parse_move(input(prompt), session.board.cols)
        except ValueError as e:
            view.status_changed(str(e))
            continue

        if cmd == QUIT:
            view.status_changed("Game quit.")
            view.draw(session.top(RANKING_TOP_N), session.tally)
            return

        if cmd == RESET:
            view.diagnostics = ""
            session.reset()
            continue

        report = session.play_human(int(cmd))
        if not report.accepted:
            view.status_changed(report.reason)
            continue

        if report.outcome.finished:
            continue

        view.draw(session.top(RANKING_TOP_N), session.tally)
        if show_thinking:
            ai_thinking(session.agent.name, AI_THINK_DELAY_SEC)

        session.play_ai()
