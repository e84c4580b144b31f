"""
Dual-mode letter-frequency heuristic.

Each round the solver decides between two modes:

  WIN      rank only the remaining candidates by how common their letters
           are among those candidates; the top word is the likeliest answer.
  EXPLORE  rank the whole corpus by how much new information its letters
           would reveal, plus a bonus for letters common among candidates.

WIN is chosen when this is the last guess, when the remaining guesses
could walk through every candidate, or when the closeness score
(constraint weight minus candidate count) is positive. Otherwise EXPLORE.

Both rankings finish with a stable sort on the number of letters a word
repeats, so words with distinct letters float to the top and ties keep
the frequency order.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, List, Sequence

from wordhunt.engine import ConstraintSet, Correct, Present
from wordhunt.errors import NoCandidates
from .base import BaseSolver, register


class Mode(str, Enum):
    WIN = "win"
    EXPLORE = "explore"


# per-letter explore scores
NEW_LETTER = 100
NEW_POSITION = 10
KNOWN = 1
FREQ_BONUS = 50


def letter_frequency(words: Iterable[str]) -> Counter:
    """Occurrences of each letter; a doubled letter counts twice."""
    counts: Counter = Counter()
    for w in words:
        counts.update(w)
    return counts


def base_score(word: str, freq: Counter) -> int:
    return sum(freq[c] for c in word)


def duplicate_count(word: str) -> int:
    """How many distinct letters occur two or more times in `word`."""
    return sum(1 for n in Counter(word).values() if n >= 2)


def closeness_score(constraints: ConstraintSet, candidates: Sequence[str]) -> int:
    return sum(state.weight for state in constraints.values()) - len(candidates)


def choose_mode(constraints: ConstraintSet, candidates: Sequence[str],
                guesses_made: int, max_guesses: int) -> Mode:
    if guesses_made >= max_guesses - 1:
        return Mode.WIN
    if max_guesses - guesses_made >= len(candidates):
        return Mode.WIN
    if closeness_score(constraints, candidates) > 0:
        return Mode.WIN
    return Mode.EXPLORE


def _prefer_distinct(ranked: List[str]) -> List[str]:
    # list.sort is stable: equal duplicate counts keep the primary order
    ranked.sort(key=duplicate_count)
    return ranked


def rank_win(candidates: Sequence[str]) -> List[str]:
    freq = letter_frequency(candidates)
    ranked = sorted(candidates, key=lambda w: -base_score(w, freq))
    return _prefer_distinct(ranked)


def explore_letter_score(letter: str, pos: int, constraints: ConstraintSet) -> int:
    state = constraints.get(letter)
    if state is None:
        return NEW_LETTER
    if isinstance(state, Correct):
        return KNOWN
    if isinstance(state, Present):
        return NEW_POSITION if state.position != pos else KNOWN
    return 0  # Absent: spends a slot on a dead letter


def explore_score(word: str, constraints: ConstraintSet, freq: Counter, max_freq: int) -> int:
    total = 0
    for pos, ch in enumerate(word):
        total += explore_letter_score(ch, pos, constraints)
        total += round(freq[ch] / max_freq * FREQ_BONUS)
    return total


def rank_explore(corpus: Iterable[str], candidates: Sequence[str],
                 constraints: ConstraintSet) -> List[str]:
    """
    Rank the full corpus; the frequency bonus is computed over `candidates`.
    """
    if not candidates:
        raise NoCandidates("no candidates to weigh letter frequencies against")
    freq = letter_frequency(candidates)
    max_freq = max(freq.values())
    ranked = sorted(corpus, key=lambda w: -explore_score(w, constraints, freq, max_freq))
    return _prefer_distinct(ranked)


def best_guess(ranked: Sequence[str]) -> str:
    if not ranked:
        raise NoCandidates("ranking produced no words")
    return ranked[0]


@register
class DualModeSolver(BaseSolver):
    id = "dual_mode"
    name = "Dual-mode letter frequency (win / explore)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        constraints: ConstraintSet = state["constraints"]
        if not candidates:
            raise NoCandidates("no candidates left to guess from")

        mode = choose_mode(constraints, candidates, state["round"],
                           state.get("max_guesses", self.max_guesses))
        self.last_mode = mode.value
        if mode is Mode.WIN:
            return best_guess(rank_win(candidates))
        return best_guess(rank_explore(state["corpus"], candidates, constraints))


@register
class GreedyCandidateSolver(BaseSolver):
    """Always plays the top WIN-mode candidate; a baseline for benchmarks."""
    id = "greedy_candidates"
    name = "Greedy candidate frequency"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if not candidates:
            raise NoCandidates("no candidates left to guess from")
        self.last_mode = Mode.WIN.value
        return best_guess(rank_win(candidates))
