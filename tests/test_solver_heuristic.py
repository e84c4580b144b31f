import pytest
from wordhunt.engine import Absent, Present, Correct
from wordhunt.errors import NoCandidates
from wordhunt.solvers import create_solver, get_solver_ids, Mode
from wordhunt.solvers.heuristic import (
    letter_frequency, base_score, duplicate_count, closeness_score, choose_mode,
    rank_win, rank_explore, explore_letter_score, best_guess,
)

FIVE = ["crane", "raise", "stare", "trace", "cared"]


def _state(candidates, corpus=None, constraints=None, round_=0, max_guesses=6):
    return {
        "round": round_,
        "candidates": list(candidates),
        "constraints": constraints or {},
        "corpus": corpus if corpus is not None else list(candidates),
        "max_guesses": max_guesses,
    }


def test_letter_frequency_counts_every_occurrence():
    freq = letter_frequency(["aabbb", "abcde"])
    assert freq["a"] == 3 and freq["b"] == 4 and freq["e"] == 1
    assert freq["z"] == 0


def test_base_score_counts_duplicates_twice():
    freq = letter_frequency(["aabbb", "abcde", "fghij"])
    assert base_score("aabbb", freq) == 2 * 3 + 3 * 4
    assert base_score("fghij", freq) == 5


@pytest.mark.parametrize("word,expected", [
    ("abcde", 0), ("level", 2), ("aabbb", 2), ("sleep", 1), ("eerie", 1),
])
def test_duplicate_count(word, expected):
    assert duplicate_count(word) == expected


def test_closeness_score():
    constraints = {"a": Correct(0), "b": Present(1), "c": Absent()}
    assert closeness_score(constraints, ["x"] * 10) == 40 + 20 + 0 - 10
    assert closeness_score({}, FIVE) == -5


def test_rank_win_prefers_distinct_letters():
    # 'aabbb' has the highest frequency score but repeats two letters
    ranked = rank_win(["aabbb", "abcde", "fghij"])
    assert ranked == ["abcde", "fghij", "aabbb"]


def test_rank_win_orders_by_candidate_frequency():
    # trace=20; crane, stare, cared=19 (stable); raise=18
    assert rank_win(FIVE) == ["trace", "crane", "stare", "cared", "raise"]


def test_ranking_example_through_solver():
    solver = create_solver("dual_mode")
    corpus = ["aabbb", "abcde", "fghij"]
    guess = solver.next_guess(_state(corpus))
    assert guess == "abcde"
    assert solver.last_mode == "win"


def test_last_guess_forces_win_mode():
    many = ["w%04d" % i for i in range(500)]
    assert choose_mode({}, many, guesses_made=5, max_guesses=6) is Mode.WIN
    assert choose_mode({}, many, guesses_made=4, max_guesses=6) is Mode.EXPLORE


def test_budget_covering_candidates_forces_win_mode():
    assert choose_mode({}, FIVE, guesses_made=1, max_guesses=6) is Mode.WIN
    assert choose_mode({}, FIVE + ["adieu"], guesses_made=1, max_guesses=6) is Mode.EXPLORE


def test_positive_closeness_forces_win_mode():
    constraints = {"c": Correct(0), "a": Present(1)}
    cands = ["w%04d" % i for i in range(59)]
    assert choose_mode(constraints, cands, guesses_made=0, max_guesses=6) is Mode.WIN
    assert choose_mode(constraints, cands + ["extra"], guesses_made=0, max_guesses=6) is Mode.EXPLORE


def test_explore_letter_scores():
    constraints = {"a": Correct(0), "b": Present(2), "c": Absent()}
    assert explore_letter_score("z", 0, constraints) == 100
    assert explore_letter_score("a", 3, constraints) == 1
    assert explore_letter_score("b", 0, constraints) == 10
    assert explore_letter_score("b", 2, constraints) == 1
    assert explore_letter_score("c", 1, constraints) == 0


def test_rank_explore_ranks_full_corpus():
    constraints = {"c": Absent(), "r": Present(0), "a": Correct(2), "n": Absent(), "e": Correct(4)}
    candidates = ["stare", "trace"]
    corpus = ["crane", "stare", "trace", "moist", "board"]
    ranked = rank_explore(corpus, candidates, constraints)
    assert sorted(ranked) == sorted(corpus)
    # 'moist' is all new letters: far ahead of words that repeat known ones
    assert ranked[0] == "moist"


def test_rank_explore_frequency_bonus_uses_candidates():
    # no constraints: every letter scores 100, so only the bonus separates words
    ranked = rank_explore(["bcdfg", "stare"], ["stare", "stark"], {})
    assert ranked == ["stare", "bcdfg"]


def test_rank_explore_needs_candidates():
    with pytest.raises(NoCandidates):
        rank_explore(FIVE, [], {})


def test_best_guess_on_empty_ranking():
    with pytest.raises(NoCandidates):
        best_guess([])


def test_solver_raises_on_empty_candidates():
    for sid in get_solver_ids():
        with pytest.raises(NoCandidates):
            create_solver(sid).next_guess(_state([], corpus=FIVE))


def test_explore_mode_can_pick_non_candidate():
    cands = ["bills", "fills", "hills", "kills", "mills", "pills", "sills", "tills", "wills"]
    corpus = cands + ["thumb", "kempt"]
    solver = create_solver("dual_mode")
    guess = solver.next_guess(_state(cands, corpus=corpus))
    assert solver.last_mode == "explore"
    assert guess not in cands


def test_registry():
    assert get_solver_ids() == ["dual_mode", "greedy_candidates"]
    with pytest.raises(ValueError):
        create_solver("entropy")
