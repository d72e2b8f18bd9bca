from __future__ import annotations
from connect4_minimax.core.board import Board, IllegalMove
from connect4_minimax.types import Player, Move


def apply_move(board: Board, move: Move, player: Player) -> bool:
    """
    Drop a piece for `player`. Full or out-of-range columns leave the board
    untouched and return False.
    """
    try:
        board.drop(move, player)
    except IllegalMove:
        return False
    return True
