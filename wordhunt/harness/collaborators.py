"""
The two collaborators a session talks to, and an in-process game that
plays both parts.

Observer.get_letter_states()
    Current ConstraintSet read off the board; {} before the first guess.
    Raises FeedbackPending if the board has not settled yet, or
    ObservationError if it cannot be read at all.

Submitter.submit_guess(word)
    Deliver a guess. Raises InvalidGuess for a word outside the corpus
    (checked before anything is delivered) and SubmissionError if delivery
    fails. Returns only after the settle delay has elapsed.
"""

from __future__ import annotations

import logging
import time
from typing import List, Protocol

from wordhunt.datasets import WordCorpus
from wordhunt.engine import (
    ConstraintSet, constraints_from_feedback, score, is_solved, validate_guess,
)
from wordhunt.engine.constraints import Row
from wordhunt.config import MAX_GUESSES
from wordhunt.errors import InvalidGuess, SubmissionError

log = logging.getLogger(__name__)


class Observer(Protocol):
    def get_letter_states(self) -> ConstraintSet: ...


class Submitter(Protocol):
    def submit_guess(self, word: str) -> None: ...


class SimulatedGame:
    """
    A board with a hidden answer. Feedback comes from the engine's `score`
    and is read back the same way a live board is: every tile, in order,
    last state per letter wins.

    Once the answer has been found the board is frozen; re-submitting the
    answer is accepted without spending a guess.
    """

    def __init__(self, answer: str, corpus: WordCorpus, *,
                 max_guesses: int = MAX_GUESSES, settle_delay: float = 0.0):
        if answer not in corpus:
            raise ValueError(f"answer {answer!r} is not in the corpus")
        self.answer = answer
        self.corpus = corpus
        self.max_guesses = max_guesses
        self.settle_delay = settle_delay
        self.rows: List[Row] = []
        self.solved = False

    @property
    def guesses_used(self) -> int:
        return len(self.rows)

    def get_letter_states(self) -> ConstraintSet:
        return constraints_from_feedback(self.rows)

    def submit_guess(self, word: str) -> None:
        if not validate_guess(word, self.corpus, self.corpus.N):
            raise InvalidGuess(f"{word!r} is not in the word list")

        if self.solved:
            if word == self.answer:
                return
            raise SubmissionError("board is already solved")
        if len(self.rows) >= self.max_guesses:
            raise SubmissionError(f"no guesses left ({self.max_guesses} used)")

        pattern = score(word, self.answer)
        self.rows.append((word, pattern))
        self.solved = is_solved(pattern)
        log.debug("board row %d: %s %s", len(self.rows), word, pattern)

        if self.settle_delay:
            time.sleep(self.settle_delay)
