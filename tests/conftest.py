"""Shared board layouts for the test suite."""

import pytest

from connect4_minimax.core.board import Board

# Full board with no four-in-a-row anywhere
DRAWN_ROWS = [
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
]


@pytest.fixture
def empty_board():
    return Board()


@pytest.fixture
def drawn_rows():
    return list(DRAWN_ROWS)


@pytest.fixture
def drawn_board():
    return Board.from_rows(DRAWN_ROWS)
