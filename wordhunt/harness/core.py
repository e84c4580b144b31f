"""
Solving session and experiment harness.

- Session:   one game against an observer/submitter pair, driven as a
             strict state machine (observe -> filter -> score -> submit).
- run_case:  play one simulated game with a given solver.
- run_batch: run many simulated games in sequence (optionally a prefix).

A Session exclusively owns its candidate list; the corpus is shared
read-only, so independent sessions can run side by side.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

from wordhunt.config import Settings
from wordhunt.datasets import WordCorpus
from wordhunt.engine import ConstraintSet, filter_candidates
from wordhunt.errors import (
    SolverError, NoCandidates, ObservationError, SubmissionError, GuessBudgetExhausted,
)
from wordhunt.solvers import BaseSolver
from .collaborators import Observer, Submitter, SimulatedGame

log = logging.getLogger(__name__)


class SessionState(str, Enum):
    AWAITING_FEEDBACK = "awaiting_feedback"
    FILTERING = "filtering"
    SCORING = "scoring"
    SUBMITTING = "submitting"
    SOLVED = "solved"
    FAILED = "failed"


TERMINAL = (SessionState.SOLVED, SessionState.FAILED)


@dataclass
class SessionResult:
    status: SessionState
    answer: Optional[str]
    rounds: int
    guesses: List[str] = field(default_factory=list)
    modes: List[Optional[str]] = field(default_factory=list)
    error_kind: Optional[str] = None
    error: Optional[str] = None

    @property
    def solved(self) -> bool:
        return self.status is SessionState.SOLVED

    def describe(self) -> str:
        if self.solved:
            return f"Solved: {self.answer} in {self.rounds} round(s)"
        return f"Failed: {self.error_kind} ({self.error})"


class Session:
    def __init__(self, corpus: WordCorpus, observer: Observer, submitter: Submitter,
                 solver: BaseSolver, settings: Settings | None = None):
        self.corpus = corpus
        self.observer = observer
        self.submitter = submitter
        self.solver = solver
        self.settings = settings or Settings(word_length=corpus.N)

        self.state = SessionState.AWAITING_FEEDBACK
        self.candidates: List[str] = list(corpus)
        self.rounds = 0
        self.guesses: List[str] = []
        self.modes: List[Optional[str]] = []
        self.error: Optional[SolverError] = None

        self.solver.reset(max_guesses=self.settings.max_guesses)

    def _transition(self, new: SessionState) -> None:
        log.debug("session: %s -> %s", self.state.value, new.value)
        self.state = new

    def _observe(self) -> ConstraintSet:
        try:
            return self.observer.get_letter_states()
        except SolverError:
            raise
        except Exception as e:
            raise ObservationError(str(e)) from e

    def _submit(self, word: str) -> None:
        try:
            self.submitter.submit_guess(word)
        except SolverError:
            raise
        except Exception as e:
            raise SubmissionError(str(e)) from e

    def run(self) -> SessionResult:
        """
        Drive rounds until SOLVED or FAILED. Errors are not retried: the
        first SolverError ends the session and is reported by kind.
        """
        constraints: ConstraintSet = {}
        guess = ""
        try:
            while self.state not in TERMINAL:
                if self.state is SessionState.AWAITING_FEEDBACK:
                    constraints = self._observe()
                    self._transition(SessionState.FILTERING)

                elif self.state is SessionState.FILTERING:
                    self.candidates = filter_candidates(self.candidates, constraints)
                    log.debug("round %d: %d candidate(s) after %d constraint(s)",
                              self.rounds + 1, len(self.candidates), len(constraints))
                    if not self.candidates:
                        raise NoCandidates("feedback is inconsistent with every word")
                    if self.rounds >= self.settings.max_guesses:
                        # the final row is on the board: it either pinned the word or not
                        if len(self.candidates) == 1:
                            self._transition(SessionState.SOLVED)
                            continue
                        raise GuessBudgetExhausted(
                            f"{self.rounds} guesses used, {len(self.candidates)} candidates left")
                    self._transition(SessionState.SCORING)

                elif self.state is SessionState.SCORING:
                    guess = self.solver.next_guess({
                        "round": self.rounds,
                        "candidates": self.candidates,
                        "constraints": constraints,
                        "corpus": self.corpus,
                        "max_guesses": self.settings.max_guesses,
                    })
                    self._transition(SessionState.SUBMITTING)

                elif self.state is SessionState.SUBMITTING:
                    self._submit(guess)
                    self.rounds += 1
                    self.guesses.append(guess)
                    self.modes.append(self.solver.last_mode)
                    log.info("round %d: guessed %s (%s mode, %d candidate(s))",
                             self.rounds, guess, self.solver.last_mode, len(self.candidates))
                    if len(self.candidates) == 1:
                        self._transition(SessionState.SOLVED)
                    else:
                        self._transition(SessionState.AWAITING_FEEDBACK)
        except SolverError as e:
            self.error = e
            log.info("session failed after %d round(s): %s: %s", self.rounds, e.kind, e)
            self._transition(SessionState.FAILED)

        return self.result()

    def result(self) -> SessionResult:
        return SessionResult(
            status=self.state,
            answer=self.candidates[0] if self.state is SessionState.SOLVED else None,
            rounds=self.rounds,
            guesses=list(self.guesses),
            modes=list(self.modes),
            error_kind=self.error.kind if self.error else None,
            error=str(self.error) if self.error else None,
        )


def run_case(
        solver: BaseSolver,
        answer: str,
        *,
        corpus: WordCorpus,
        settings: Settings | None = None,
) -> Dict:
    """
    Play one simulated game until the session is solved or fails.

    Returns:
        dict with keys:
            answer, success, rounds, guesses (board rows used), error_kind,
            time_ms, history (list[(guess, pattern)]), modes, solver_id
    """
    settings = settings or Settings(word_length=corpus.N)
    game = SimulatedGame(answer, corpus, max_guesses=settings.max_guesses,
                         settle_delay=settings.settle_delay)
    session = Session(corpus, game, game, solver, settings)

    t0 = time.perf_counter()
    res = session.run()
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "solver_id": solver.id,
        "answer": answer,
        # the board is the judge: a session can only report SOLVED by
        # narrowing to one word, which must be the answer
        "success": res.solved and res.answer == answer and game.solved,
        "rounds": res.rounds,
        "guesses": game.guesses_used,
        "error_kind": res.error_kind,
        "time_ms": dt,
        "history": list(game.rows),
        "modes": res.modes,
    }


def run_batch(
        solver: BaseSolver,
        answers: Iterable[str],
        *,
        corpus: WordCorpus,
        settings: Settings | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.
    """
    pool = [w for w in answers if w in corpus]
    if sample is not None:
        pool = pool[:sample]
    return [run_case(solver, ans, corpus=corpus, settings=settings) for ans in pool]
