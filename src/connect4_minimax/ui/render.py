from __future__ import annotations
from typing import Optional, Iterable, List, Sequence, Set

from connect4_minimax.config import CLEAR_SCREEN, HUMAN
from connect4_minimax.core.board import Board
from connect4_minimax.stats.ranking import RankingEntry
from connect4_minimax.stats.tally import SessionTally, avg_ms_per_move, avg_nodes_per_move
from connect4_minimax.types import Cell, Coord
from connect4_minimax.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_GREEN, FG_RED, FG_YELLOW, REVERSE


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if cell == HUMAN:
        return c(cell, FG_RED)
    return c(cell, FG_YELLOW)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c("CONNECT 4 · MINIMAX", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    nums = "   " + " ".join(str(i + 1) for i in range(board.cols))
    print(c(nums, DIM))

    for r in range(board.rows):
        parts = []
        for cidx in range(board.cols):
            p = _piece(board.grid[r][cidx])
            if (r, cidx) in hl:
                p = c(p, REVERSE)
            parts.append(p)

        print(" | " + " ".join(parts) + " |")

    print(c("   " + "—" * (2 * board.cols - 1), DIM))
    print(c("   Enter 1-7 to drop, r to restart, q to quit.", DIM))


def render_scoreboard(top: Sequence[RankingEntry], tally: SessionTally) -> None:
    print()
    print(c("Ranking", BOLD))
    for i, entry in enumerate(top, start=1):
        print(f"  {i}. {entry.name:<16} {c(f'{entry.score:>3} pts', FG_GREEN)}")
    print(
        c(
            f"  You {tally.human_wins} · AI {tally.ai_wins} · Draws {tally.draws}"
            f" · Moves analysed {tally.last_nodes}"
            f" · Avg {avg_nodes_per_move(tally):.0f} nodes, {avg_ms_per_move(tally):.1f}ms per AI move",
            DIM,
        )
    )


class ConsoleView:
    """Session observer that redraws the terminal after every change."""

    def __init__(self) -> None:
        self.board: Optional[Board] = None
        self.status = ""
        self.highlight: List[Coord] = []
        self.diagnostics = ""

    def board_changed(self, board: Board) -> None:
        self.board = board
        self.highlight = []

    def status_changed(self, status: str) -> None:
        self.status = status

    def winning_line(self, line: Sequence[Coord]) -> None:
        self.highlight = list(line)

    def search_finished(self, result) -> None:
        col = int(result.move) + 1 if result.move is not None else "-"
        self.diagnostics = (
            f"AI chose {col} | d={result.depth} | nodes={result.nodes}"
            f" | eval={result.value} | {result.time_ms}ms"
        )

    def draw(self, top: Sequence[RankingEntry], tally: SessionTally) -> None:
        if self.board is None:
            return
        status = self.status
        if self.diagnostics:
            status = f"{self.diagnostics}\n{status}"
        render(self.board, status, highlight=self.highlight)
        render_scoreboard(top, tally)
