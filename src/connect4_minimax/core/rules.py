from __future__ import annotations
from typing import Optional, List, Tuple

from connect4_minimax.config import CONNECT_N, HUMAN, AI
from connect4_minimax.types import Coord, Player
from connect4_minimax.core.board import Board

# (d_row, d_col) in scan order: horizontal, vertical, down-right, up-right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (-1, 1))


def find_winning_line(board: Board, player: Player) -> Optional[List[Coord]]:
    """
    First four-in-a-row for `player`, scanning cells top-left to
    bottom-right and trying each direction in turn. Pure: never touches the
    board or any display state.
    """
    g = board.grid
    rows, cols = board.rows, board.cols
    span = CONNECT_N - 1

    for r in range(rows):
        for c in range(cols):
            if g[r][c] != player:
                continue
            for dr, dc in DIRECTIONS:
                end_r, end_c = r + dr * span, c + dc * span
                if not (0 <= end_r < rows and 0 <= end_c < cols):
                    continue
                if all(g[r + dr * i][c + dc * i] == player for i in range(1, CONNECT_N)):
                    return [(r + dr * i, c + dc * i) for i in range(CONNECT_N)]

    return None


def has_won(board: Board, player: Player) -> bool:
    return find_winning_line(board, player) is not None


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    for p in (AI, HUMAN):
        line = find_winning_line(board, p)
        if line is not None:
            return p, line
    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None


def is_terminal(board: Board) -> bool:
    return board.is_full() or check_winner(board) is not None
