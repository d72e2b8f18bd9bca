from __future__ import annotations
from typing import Iterator, List

from connect4_minimax.config import AI, CONNECT_N, WIN_SCORE, WINDOW_WEIGHTS
from connect4_minimax.core.board import Board
from connect4_minimax.core.rules import DIRECTIONS, has_won
from connect4_minimax.types import Cell, Coord, Player


def _other(p: Player) -> Player:
    return "O" if p == "X" else "X"


def windows(board: Board) -> Iterator[List[Coord]]:
    """
    Every length-4 run of cells in the four scan directions, each window
    yielded once from its first cell.
    """
    span = CONNECT_N - 1
    for r in range(board.rows):
        for c in range(board.cols):
            for dr, dc in DIRECTIONS:
                end_r, end_c = r + dr * span, c + dc * span
                if 0 <= end_r < board.rows and 0 <= end_c < board.cols:
                    yield [(r + dr * i, c + dc * i) for i in range(CONNECT_N)]


def score_window(cells: List[Cell], maximizer: Player = AI) -> int:
    max_count = cells.count(maximizer)
    min_count = cells.count(_other(maximizer))

    # mixed window: both sides present => blocked
    if max_count > 0 and min_count > 0:
        return 0
    if max_count:
        return WINDOW_WEIGHTS[max_count]
    if min_count:
        return -WINDOW_WEIGHTS[min_count]
    return 0


def evaluate(board: Board, maximizer: Player = AI) -> int:
    """
    Static score from the maximizer's point of view: +/-1000 for a realised
    four-in-a-row, 0 for a full board, otherwise the sum of window credits.
    """
    if has_won(board, maximizer):
        return WIN_SCORE
    if has_won(board, _other(maximizer)):
        return -WIN_SCORE
    if board.is_full():
        return 0

    g = board.grid
    score = 0
    for coords in windows(board):
        score += score_window([g[r][c] for (r, c) in coords], maximizer)
    return score
