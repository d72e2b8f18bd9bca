"""Tests for the ranking list and session tally."""

from connect4_minimax.stats.ranking import Ranking, RankingEntry, merge_sort
from connect4_minimax.stats.tally import SessionTally, avg_ms_per_move, avg_nodes_per_move


def names(ranking):
    return [e.name for e in ranking.items]


def test_initial_ties_newest_first():
    """Entries inserted with equal scores go in front of older ones."""
    r = Ranking(["Minimax AI", "Human Player"])
    assert names(r) == ["Human Player", "Minimax AI"]
    assert len(r) == 2


def test_win_then_draw_scenario():
    r = Ranking(["Minimax AI", "Human Player"])
    r.award("Minimax AI", 3)
    assert names(r) == ["Minimax AI", "Human Player"]

    r.award("Human Player", 1)
    r.award("Minimax AI", 1)

    top = r.top(2)
    assert (top[0].name, top[0].score) == ("Minimax AI", 4)
    assert (top[1].name, top[1].score) == ("Human Player", 1)


def test_insert_keeps_descending_order():
    r = Ranking()
    for name, score in [("a", 5), ("b", 9), ("c", 1), ("d", 5)]:
        r.insert(RankingEntry(name, score))
    assert [(e.name, e.score) for e in r.items] == [("b", 9), ("d", 5), ("a", 5), ("c", 1)]


def test_update_existing_and_new():
    r = Ranking(["a", "b"])
    r.update("a", 10)
    assert names(r) == ["a", "b"]
    r.update("c", 4)
    assert names(r) == ["a", "c", "b"]
    assert r.score_of("c") == 4


def test_award_unknown_name_registers_it():
    r = Ranking(["a"])
    r.award("z", 2)
    assert names(r) == ["z", "a"]
    assert r.score_of("missing") == 0
    assert r.find("missing") is None


def test_merge_sort_is_stable():
    items = [RankingEntry("a", 1), RankingEntry("b", 3), RankingEntry("c", 1), RankingEntry("d", 3)]
    out = merge_sort(items)
    assert [e.name for e in out] == ["b", "d", "a", "c"]
    # input untouched
    assert [e.name for e in items] == ["a", "b", "c", "d"]


def test_top_limits_length():
    r = Ranking([str(i) for i in range(8)])
    assert len(r.top()) == 5
    assert len(r.top(3)) == 3


def test_tally_averages():
    t = SessionTally()
    assert avg_nodes_per_move(t) == 0.0
    assert avg_ms_per_move(t) == 0.0

    t.add_search(nodes=8, time_ms=2)
    t.add_search(nodes=57, time_ms=4)
    assert t.moves == 2
    assert t.last_nodes == 57
    assert avg_nodes_per_move(t) == 32.5
    assert avg_ms_per_move(t) == 3.0

    t.human_wins, t.ai_wins, t.draws = 1, 2, 3
    assert t.games == 6
