"""Tests for the minimax search engine."""

import threading

import pytest

from connect4_minimax.ai.minimax_agent import MinimaxAgent, SearchResult
from connect4_minimax.core.board import Board
from connect4_minimax.core.scoring import evaluate
from connect4_minimax.game.actions import apply_move
from connect4_minimax.game.state import GameState

WIN_IN_ONE = [
    ".......",
    ".......",
    ".......",
    ".......",
    "XX.....",
    "OOO..X.",
]

MUST_BLOCK = [
    ".......",
    ".......",
    ".......",
    "...X...",
    "..OX...",
    "..OXO..",
]


def test_empty_board_depth_one(empty_board):
    """Depth 1 on an empty board picks the center (most windows)."""
    agent = MinimaxAgent(depth=1)
    result = agent.search(empty_board)

    assert isinstance(result, SearchResult)
    assert result.move is not None
    assert 0 <= result.move < 7
    assert result.move == 3
    assert result.value == 7
    assert result.nodes == 8


def test_node_count_full_width(empty_board):
    """No pruning: 1 + 7 + 49 nodes at depth 2."""
    agent = MinimaxAgent(depth=2)
    result = agent.search(empty_board)
    assert result.nodes == 57
    assert agent.last_info["nodes"] == 57


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_takes_immediate_win(depth):
    """Three in a row with column 3 open: play column 3."""
    board = Board.from_rows(WIN_IN_ONE)
    agent = MinimaxAgent(depth=depth)
    result = agent.search(board)

    assert result.move == 3
    assert result.value == 1000

    after = board.copy()
    assert apply_move(after, result.move, "O")
    assert evaluate(after) == 1000


def test_ties_prefer_lower_column():
    """Two winning columns: the leftmost wins the tie."""
    board = Board()
    for col in (1, 2, 3):
        board.drop(col, "O")
    result = MinimaxAgent(depth=1).search(board)
    assert result.move == 0
    assert result.value == 1000


def test_blocks_opponent_threat():
    """Depth 2 sees the opponent's vertical threat and blocks it."""
    board = Board.from_rows(MUST_BLOCK)
    result = MinimaxAgent(depth=2).search(board)
    assert result.move == 3
    assert result.value > -1000


def test_search_does_not_mutate_board():
    board = Board.from_rows(MUST_BLOCK)
    before = board.to_rows()
    MinimaxAgent(depth=3).search(board)
    assert board.to_rows() == before


def test_full_board_returns_no_move(drawn_board):
    """No legal column: the root reports no move and the static value."""
    result = MinimaxAgent(depth=4).search(drawn_board)
    assert result.move is None
    assert result.value == 0
    assert result.nodes == 1


def test_already_won_root_returns_no_move():
    board = Board()
    for col in range(4):
        board.drop(col, "X")
    result = MinimaxAgent(depth=3).search(board)
    assert result.move is None
    assert result.value == -1000


def test_zero_depth_root_returns_no_move(empty_board):
    result = MinimaxAgent().search(empty_board, depth=0)
    assert result.move is None
    assert result.value == evaluate(empty_board)


@pytest.mark.parametrize("maximizing", [True, False])
def test_depth_zero_value_equals_evaluate(maximizing):
    board = Board.from_rows(MUST_BLOCK)
    agent = MinimaxAgent()
    assert agent.minimax_value(board, 0, maximizing) == evaluate(board)
    assert agent.nodes == 1


def test_minimizing_side_takes_its_win():
    """The minimizer picks the move that drives the score to -1000."""
    board = Board()
    for col in range(3):
        board.drop(col, "X")
    agent = MinimaxAgent()
    assert agent.minimax_value(board, 1, False) == -1000
    assert agent.nodes == 8


def test_maximizing_value_matches_root(empty_board):
    agent = MinimaxAgent(depth=2)
    root = agent.search(empty_board)
    assert agent.minimax_value(empty_board, 2, True) == root.value


def test_choose_move_uses_state_board():
    state = GameState(board=Board.from_rows(WIN_IN_ONE), current="O")
    assert MinimaxAgent(depth=2).choose_move(state) == 3


def test_cancelled_search_stops_expanding(empty_board):
    cancel = threading.Event()
    cancel.set()
    agent = MinimaxAgent(depth=3, cancel=cancel)

    result = agent.search(empty_board)
    assert result.cancelled
    assert result.move is None
    assert result.nodes == 1


def test_unset_cancel_event_changes_nothing():
    board = Board.from_rows(MUST_BLOCK)
    plain = MinimaxAgent(depth=3).search(board)
    guarded = MinimaxAgent(depth=3, cancel=threading.Event()).search(board)

    assert not guarded.cancelled
    assert (guarded.move, guarded.value, guarded.nodes) == (plain.move, plain.value, plain.nodes)


def test_trace_records_every_node(empty_board):
    agent = MinimaxAgent(depth=2, record_trace=True)
    result = agent.search(empty_board)

    trace = agent.trace
    assert trace is not None
    assert len(trace) == result.nodes == 57
    assert trace.root.value == result.value
    assert [n.move for n in trace.children_of(0)] == list(range(7))
    assert trace.max_depth() == 2
    assert len(trace.leaves()) == 49
    assert all(n.value is not None for n in trace.nodes)


def test_trace_off_by_default(empty_board):
    agent = MinimaxAgent(depth=1)
    agent.search(empty_board)
    assert agent.trace is None


def test_trace_is_not_a_constructor_argument():
    with pytest.raises(TypeError):
        MinimaxAgent(trace=None)


def test_each_search_gets_a_fresh_trace(empty_board):
    agent = MinimaxAgent(depth=1, record_trace=True)
    agent.search(empty_board)
    first = agent.trace
    agent.search(empty_board)

    assert agent.trace is not first
    assert len(agent.trace) == 8


def test_values_are_integers(empty_board):
    agent = MinimaxAgent(depth=2)
    result = agent.search(empty_board)

    assert isinstance(result.value, int)
    assert isinstance(agent.minimax_value(empty_board, 2, True), int)
    assert isinstance(agent.search(empty_board, depth=0).value, int)
