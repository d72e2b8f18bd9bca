from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence

from connect4_minimax.ai.minimax_agent import MinimaxAgent, SearchResult
from connect4_minimax.config import (
    AI,
    HUMAN,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    SessionConfig,
)
from connect4_minimax.core.board import Board
from connect4_minimax.core.rules import find_winning_line
from connect4_minimax.game.actions import apply_move
from connect4_minimax.game.results import MoveReport, Outcome
from connect4_minimax.game.state import GameState
from connect4_minimax.stats.ranking import Ranking, RankingEntry
from connect4_minimax.stats.tally import SessionTally
from connect4_minimax.types import Coord, Move, Player

logger = logging.getLogger(__name__)

STATUS_YOUR_TURN = "Your turn! Pick a column."
STATUS_AI_THINKING = "AI is thinking..."
STATUS_HUMAN_WINS = "You win!"
STATUS_AI_WINS = "AI wins!"
STATUS_DRAW = "Draw game."


class SessionObserver(Protocol):
    """Presentation hooks. Every method is optional for implementers."""

    def board_changed(self, board: Board) -> None: ...

    def status_changed(self, status: str) -> None: ...

    def winning_line(self, line: Sequence[Coord]) -> None: ...

    def search_finished(self, result: SearchResult) -> None: ...

    def ranking_changed(self, top: List[RankingEntry], tally: SessionTally) -> None: ...


class GameSession:
    """
    One human-vs-AI match context: live board, turn, game-over flag, the
    AI's difficulty, and the win/draw tally and ranking that outlive resets.
    """

    def __init__(
        self,
        config: SessionConfig = SessionConfig(),
        agent: Optional[MinimaxAgent] = None,
        observers: Sequence[SessionObserver] = (),
    ) -> None:
        self.config = config
        # a supplied agent keeps its own depth; otherwise the config sets it
        self.agent = agent if agent is not None else MinimaxAgent(name=config.ai_name, depth=config.difficulty)
        self.observers: List[SessionObserver] = list(observers)

        self.tally = SessionTally()
        self.ranking = Ranking([config.ai_name, config.human_name])
        self.last_search: Optional[SearchResult] = None

        self.set_difficulty(self.agent.depth)
        self.state = GameState(board=Board(), current=HUMAN)

    # ---------------------------------------------------------------
    # Input surface
    # ---------------------------------------------------------------
    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def difficulty(self) -> int:
        return self.agent.depth

    def set_difficulty(self, depth: int) -> None:
        d = int(depth)
        if d < MIN_DIFFICULTY or d > MAX_DIFFICULTY:
            raise ValueError(f"Difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}.")
        self.agent.depth = d

    def reset(self) -> None:
        self.state = GameState(board=Board(), current=HUMAN)
        self.last_search = None
        self.tally.last_nodes = 0
        self._notify("board_changed", self.state.board)
        self._status(STATUS_YOUR_TURN)

    def accepts_human_input(self) -> bool:
        s = self.state
        return not s.game_over and not s.thinking and s.current == HUMAN

    def play_human(self, col: int) -> MoveReport:
        if not self.accepts_human_input():
            return MoveReport(accepted=False, reason="Not accepting moves right now.")

        move = Move(col)
        if not apply_move(self.state.board, move, HUMAN):
            return MoveReport(accepted=False, player=HUMAN, move=move, reason="Illegal move.")

        self._notify("board_changed", self.state.board)
        outcome = self._after_move(HUMAN)
        if not outcome.finished:
            self.state.current = AI
            self._status(STATUS_AI_THINKING)
        return MoveReport(accepted=True, player=HUMAN, move=move, outcome=outcome)

    def play_ai(self) -> MoveReport:
        s = self.state
        if s.game_over or s.current != AI:
            return MoveReport(accepted=False, reason="Not the AI's turn.")

        s.thinking = True
        try:
            result = self.agent.search(s.board)
        finally:
            s.thinking = False

        self.last_search = result
        self._notify("search_finished", result)

        if result.cancelled:
            # turn stays with the AI; nothing is scored
            return MoveReport(accepted=False, player=AI, reason="Search cancelled.")

        self.tally.add_search(result.nodes, result.time_ms)

        if result.move is None:
            if not s.board.is_full():
                return MoveReport(accepted=False, player=AI, reason="No legal move.")
            outcome = Outcome(draw=True)
            self._finish(outcome)
            return MoveReport(accepted=False, player=AI, outcome=outcome, reason="No legal move.")

        if not apply_move(s.board, result.move, AI):
            return MoveReport(accepted=False, player=AI, move=result.move, reason="Illegal move.")

        self._notify("board_changed", s.board)
        outcome = self._after_move(AI)
        if not outcome.finished:
            s.current = HUMAN
            self._status(STATUS_YOUR_TURN)
        return MoveReport(accepted=True, player=AI, move=result.move, outcome=outcome)

    def top(self, n: int = 5) -> List[RankingEntry]:
        return self.ranking.top(n)

    # ---------------------------------------------------------------
    # Internals
    # ---------------------------------------------------------------
    def _after_move(self, mover: Player) -> Outcome:
        board = self.state.board
        line = find_winning_line(board, mover)
        if line is not None:
            outcome = Outcome(winner=mover, winning_line=tuple(line))
        elif board.is_full():
            outcome = Outcome(draw=True)
        else:
            return Outcome()

        self._finish(outcome)
        return outcome

    def _finish(self, outcome: Outcome) -> None:
        s = self.state
        s.game_over = True
        s.winner = outcome.winner
        s.winning_line = list(outcome.winning_line)

        cfg = self.config
        if outcome.winner == HUMAN:
            self.tally.human_wins += 1
            self.ranking.award(cfg.human_name, cfg.win_points)
            status = STATUS_HUMAN_WINS
        elif outcome.winner == AI:
            self.tally.ai_wins += 1
            self.ranking.award(cfg.ai_name, cfg.win_points)
            status = STATUS_AI_WINS
        else:
            self.tally.draws += 1
            self.ranking.award(cfg.human_name, cfg.draw_points)
            self.ranking.award(cfg.ai_name, cfg.draw_points)
            status = STATUS_DRAW

        logger.info("Game over: %s (tally %d-%d-%d)", status, self.tally.human_wins, self.tally.draws, self.tally.ai_wins)

        if s.winning_line:
            self._notify("winning_line", s.winning_line)
        self._status(status)
        self._notify("ranking_changed", self.ranking.top(), self.tally)

    def _status(self, status: str) -> None:
        self.state.last_status = status
        self._notify("status_changed", status)

    def _notify(self, hook: str, *args) -> None:
        for obs in self.observers:
            fn = getattr(obs, hook, None)
            if fn is not None:
                fn(*args)
