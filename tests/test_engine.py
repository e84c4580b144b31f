import pytest
from wordhunt.engine import (
    score, is_solved, Absent, Present, Correct,
    filter_candidates, constraints_from_feedback, validate_guess,
)

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "level", "lemon"]


# --- feedback golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_score_length_mismatch():
    with pytest.raises(ValueError):
        score("cranes", "crane")


def test_is_solved():
    assert is_solved("GGGGG")
    assert not is_solved("GGGG-")
    assert not is_solved("")


# --- one predicate per constraint kind ---
def test_absent_excludes_letter_everywhere():
    out = filter_candidates(WORDS, {"e": Absent()})
    assert out == ["scoop"]


def test_present_requires_letter_elsewhere():
    out = filter_candidates(WORDS, {"r": Present(0)})
    assert "raise" not in out and "racer" not in out
    assert all("r" in w and w[0] != "r" for w in out)
    assert out == ["crane", "stare", "trace", "cared"]


def test_correct_pins_position():
    out = filter_candidates(WORDS, {"c": Correct(0)})
    assert out == ["crane", "cared"]


def test_filter_preserves_input_order():
    out = filter_candidates(WORDS, {"a": Present(0)})
    assert out == [w for w in WORDS if w in out]


@pytest.mark.parametrize("constraints", [
    {},
    {"e": Absent()},
    {"r": Present(0), "e": Correct(4)},
    {"c": Correct(0), "a": Present(1), "s": Absent()},
])
def test_filter_idempotent_and_monotone(constraints):
    once = filter_candidates(WORDS, constraints)
    assert filter_candidates(once, constraints) == once
    assert len(once) <= len(WORDS)


def test_filter_order_of_constraints_irrelevant():
    a = {"c": Correct(0), "e": Present(3), "s": Absent()}
    b = dict(reversed(list(a.items())))
    assert filter_candidates(WORDS, a) == filter_candidates(WORDS, b)


def test_contradictory_constraints_give_empty_list():
    assert filter_candidates(WORDS, {"c": Correct(0), "r": Correct(0)}) == []


def test_absent_also_drops_words_with_duplicate_letter():
    # the last tile for a letter decides its state, even when an earlier
    # tile for the same letter was green
    states = constraints_from_feedback([("lemon", score("lemon", "level")),
                                        ("belle", score("belle", "level"))])
    assert states["e"] == Present(4)
    states = constraints_from_feedback([("eerie", score("eerie", "level"))])
    assert states["e"] == Absent()
    assert "level" not in filter_candidates(WORDS, states)


# --- board reading ---
def test_constraints_from_feedback_last_tile_wins():
    states = constraints_from_feedback([("trace", "-GGYG")])
    assert states == {
        "t": Absent(), "r": Correct(1), "a": Correct(2), "c": Present(3), "e": Correct(4),
    }
    states = constraints_from_feedback([("trace", "-GGYG"), ("crane", "GGGGG")])
    assert states["c"] == Correct(0)


def test_constraints_from_feedback_empty_board():
    assert constraints_from_feedback([]) == {}


def test_constraints_from_feedback_rejects_bad_tiles():
    with pytest.raises(ValueError):
        constraints_from_feedback([("crane", "GGXGG")])
    with pytest.raises(ValueError):
        constraints_from_feedback([("crane", "GG")])


def test_state_weights():
    assert (Absent.weight, Present(0).weight, Correct(0).weight) == (0, 20, 40)


def test_validate_guess():
    corpus = {"crane", "raise", "stare"}
    assert validate_guess("crane", corpus, N=5) is True
    assert validate_guess("CRANE", corpus, N=5) is False
    assert validate_guess("cranes", corpus, N=5) is False
    assert validate_guess("trace", corpus, N=5) is False
    assert validate_guess(None, corpus, N=5) is False
