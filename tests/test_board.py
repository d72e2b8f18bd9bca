"""Tests for the board model and move application."""

import pytest

from connect4_minimax.core.board import Board, IllegalMove, OutOfRangeColumn
from connect4_minimax.game.actions import apply_move


def test_board_initialization(empty_board):
    """New boards are 6x7 and empty."""
    assert empty_board.rows == 6
    assert empty_board.cols == 7
    assert all(cell is None for row in empty_board.grid for cell in row)
    assert empty_board.piece_count() == 0
    assert not empty_board.is_full()


def test_drop_stacks_from_bottom(empty_board):
    """Pieces fall to the lowest empty cell of the column."""
    assert empty_board.drop(3, "X") == 5
    assert empty_board.drop(3, "O") == 4
    assert empty_board.grid[5][3] == "X"
    assert empty_board.grid[4][3] == "O"


def test_drop_full_column_raises(empty_board):
    """A full column is rejected without touching the board."""
    for i in range(6):
        empty_board.drop(0, "X" if i % 2 == 0 else "O")
    before = empty_board.to_rows()

    with pytest.raises(IllegalMove):
        empty_board.drop(0, "X")
    assert empty_board.to_rows() == before


@pytest.mark.parametrize("col", [-1, 7, 100])
def test_drop_out_of_range_raises(empty_board, col):
    """Out-of-range columns raise a ValueError subclass."""
    with pytest.raises(OutOfRangeColumn):
        empty_board.drop(col, "X")
    with pytest.raises(ValueError):
        empty_board.drop(col, "X")


def test_apply_move_reports_failure_without_mutation(empty_board):
    """apply_move returns False for illegal or out-of-range columns."""
    for _ in range(6):
        assert apply_move(empty_board, 2, "O")
    before = empty_board.to_rows()

    assert not apply_move(empty_board, 2, "X")
    assert not apply_move(empty_board, 7, "X")
    assert not apply_move(empty_board, -1, "X")
    assert empty_board.to_rows() == before


def test_valid_moves_ascending(empty_board):
    """Legal moves are listed left to right and skip full columns."""
    for _ in range(6):
        empty_board.drop(4, "X")
    assert empty_board.valid_moves() == [0, 1, 2, 3, 5, 6]
    assert not empty_board.is_valid_move(4)
    assert not empty_board.is_valid_move(7)
    assert empty_board.is_valid_move(0)


def test_is_full(drawn_board):
    """A board is full once every top cell is occupied."""
    assert drawn_board.is_full()
    assert drawn_board.valid_moves() == []


def test_copy_is_isolated(empty_board):
    """Moves on a clone never leak into the original."""
    empty_board.drop(3, "X")
    clone = empty_board.copy()

    assert apply_move(clone, 3, "O")
    assert apply_move(clone, 0, "X")

    assert empty_board.grid[4][3] is None
    assert empty_board.grid[5][0] is None
    assert empty_board.piece_count() == 1
    assert clone.piece_count() == 3


def test_from_rows_and_to_rows():
    """Text layouts load top row first."""
    rows = [
        ".......",
        ".......",
        ".......",
        ".......",
        "...O...",
        "..XXO..",
    ]
    board = Board.from_rows(rows)
    assert board.grid[5][2] == "X"
    assert board.grid[4][3] == "O"
    assert board.to_rows() == rows


def test_from_rows_rejects_floating_piece():
    """Pieces must rest on the bottom or on another piece."""
    rows = ["......."] * 4 + ["...X...", "......."]
    with pytest.raises(ValueError):
        Board.from_rows(rows)


@pytest.mark.parametrize(
    "rows",
    [
        ["......."] * 5,
        ["......"] * 6,
        ["......."] * 5 + ["..Z...."],
    ],
)
def test_from_rows_rejects_bad_layout(rows):
    """Wrong shapes and unknown symbols are rejected."""
    with pytest.raises(ValueError):
        Board.from_rows(rows)


def test_mirrored():
    """Mirroring reverses every row."""
    board = Board()
    board.drop(0, "X")
    board.drop(1, "O")
    m = board.mirrored()
    assert m.grid[5][6] == "X"
    assert m.grid[5][5] == "O"
    assert board.grid[5][0] == "X"
