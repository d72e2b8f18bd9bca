from __future__ import annotations

from dataclasses import dataclass, field
import logging
import threading
import time
from typing import Optional

from connect4_minimax.ai.trace import SearchTrace
from connect4_minimax.config import AI, DEFAULT_DIFFICULTY
from connect4_minimax.core.board import Board
from connect4_minimax.core.rules import has_won
from connect4_minimax.core.scoring import evaluate
from connect4_minimax.game.state import GameState
from connect4_minimax.types import Move, Player

logger = logging.getLogger(__name__)


def _other(p: Player) -> Player:
    return "O" if p == "X" else "X"


@dataclass(frozen=True, slots=True)
class SearchResult:
    move: Optional[Move]  # None when there is nothing to play
    value: int
    nodes: int
    time_ms: int
    depth: int
    cancelled: bool = False


@dataclass(slots=True)
class MinimaxAgent:
    """
    Full-width minimax over the static window evaluation.

    Every level scores boards from the maximizer's side; minimizing levels
    pick the smallest of those scores. Columns are expanded left to right
    and only strict improvements replace the current best, so the lowest
    column wins ties.
    """

    name: str = "Minimax AI"
    depth: int = DEFAULT_DIFFICULTY
    maximizer: Player = AI
    cancel: Optional[threading.Event] = None
    record_trace: bool = False
    trace: Optional[SearchTrace] = field(default=None, init=False)

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0

    def choose_move(self, state: GameState) -> Optional[Move]:
        return self.search(state.board).move

    def search(self, board: Board, depth: Optional[int] = None) -> SearchResult:
        d = self.depth if depth is None else int(depth)

        self._nodes = 0
        self.trace = SearchTrace() if self.record_trace else None
        start = time.perf_counter()

        self._nodes += 1
        root = self.trace.add(-1, None, 0) if self.trace is not None else -1

        best_move: Optional[Move] = None
        cancelled = False

        if d < 1 or self._is_leaf(board):
            best_value: Optional[int] = evaluate(board, self.maximizer)
        else:
            best_value = None
            for col in board.valid_moves():
                if self._cancelled():
                    cancelled = True
                    break

                child = board.copy()
                child.drop(col, self.maximizer)
                value = self._value(child, d - 1, False, root, int(col), 1)

                if best_value is None or value > best_value:
                    best_value = value
                    best_move = col

            if best_value is None:
                best_value = evaluate(board, self.maximizer)

        if self.trace is not None:
            self.trace.resolve(root, best_value)

        elapsed = time.perf_counter() - start
        result = SearchResult(
            move=best_move,
            value=best_value,
            nodes=self._nodes,
            time_ms=int(elapsed * 1000),
            depth=d,
            cancelled=cancelled,
        )

        self.last_info = {
            "depth": d,
            "nodes": result.nodes,
            "eval": best_value,
            "move_col": (int(best_move) + 1) if best_move is not None else None,
            "time_ms": result.time_ms,
            "cancelled": cancelled,
        }
        logger.debug(
            "%s analysed %d nodes in %.2fms (depth=%d, move=%s, eval=%s)",
            self.name, result.nodes, elapsed * 1000, d, best_move, best_value,
        )
        return result

    def minimax_value(self, board: Board, depth: int, maximizing: bool) -> int:
        """
        Value of `board` searched `depth` plies deep with the maximizer (or
        its opponent) to move.
        """
        self._nodes = 0
        return self._value(board, depth, maximizing, -1, None, 0)

    @property
    def nodes(self) -> int:
        return self._nodes

    def _cancelled(self) -> bool:
        return self.cancel is not None and self.cancel.is_set()

    def _is_leaf(self, board: Board) -> bool:
        return (
            has_won(board, self.maximizer)
            or has_won(board, _other(self.maximizer))
            or board.is_full()
        )

    def _value(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        parent: int,
        move: Optional[int],
        ply: int,
    ) -> int:
        self._nodes += 1
        idx = self.trace.add(parent, move, ply) if self.trace is not None else -1

        if depth == 0 or self._is_leaf(board):
            leaf = evaluate(board, self.maximizer)
            if self.trace is not None:
                self.trace.resolve(idx, leaf)
            return leaf

        to_play = self.maximizer if maximizing else _other(self.maximizer)
        v: Optional[int] = None

        for col in board.valid_moves():
            if self._cancelled():
                break

            child = board.copy()
            child.drop(col, to_play)
            value = self._value(child, depth - 1, not maximizing, idx, int(col), ply + 1)
            if v is None:
                v = value
            elif maximizing:
                if value > v:
                    v = value
            else:
                if value < v:
                    v = value

        if v is None:
            v = evaluate(board, self.maximizer)

        if self.trace is not None:
            self.trace.resolve(idx, v)
        return v
