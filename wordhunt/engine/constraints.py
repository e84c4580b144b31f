"""
Letter constraints and candidate filtering.

A ConstraintSet maps each letter seen on the board to ONE state:
  - Absent()        : the letter is nowhere in the answer
  - Present(pos)    : the letter is in the answer, but not at `pos`
  - Correct(pos)    : the letter is at `pos`

Reading the board tile by tile, a later tile for the same letter replaces
the earlier state. With doubled letters this loses information (a green
'e' followed by a gray 'e' reads as Absent); filtering honours exactly
what the set says.

filter_candidates keeps the words that satisfy every constraint. Each
constraint is an independent predicate, so the order they are applied in
does not matter, and re-applying the same set changes nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Iterable, List, Tuple, Union

from .scoring import CORRECT, PRESENT, ABSENT


@dataclass(frozen=True)
class Absent:
    weight: ClassVar[int] = 0

    def allows(self, word: str, letter: str) -> bool:
        return letter not in word


@dataclass(frozen=True)
class Present:
    position: int
    weight: ClassVar[int] = 20

    def allows(self, word: str, letter: str) -> bool:
        return letter in word and word[self.position] != letter


@dataclass(frozen=True)
class Correct:
    position: int
    weight: ClassVar[int] = 40

    def allows(self, word: str, letter: str) -> bool:
        return word[self.position] == letter


LetterState = Union[Absent, Present, Correct]
ConstraintSet = Dict[str, LetterState]

# One board row: the guessed word and its tile pattern ('G', 'Y', '-').
Row = Tuple[str, str]


def satisfies(word: str, constraints: ConstraintSet) -> bool:
    return all(state.allows(word, letter) for letter, state in constraints.items())


def filter_candidates(candidates: Iterable[str], constraints: ConstraintSet) -> List[str]:
    """
    Keep the candidates that satisfy every constraint, in their original order.

    An empty result is a legitimate outcome (contradictory feedback); callers
    decide what to do with it.
    """
    return [w for w in candidates if satisfies(w, constraints)]


def constraints_from_feedback(rows: Iterable[Row]) -> ConstraintSet:
    """
    Collapse board rows into a ConstraintSet, reading tiles left to right,
    top to bottom; the last tile seen for a letter wins.
    """
    out: ConstraintSet = {}
    for guess, pattern in rows:
        if len(guess) != len(pattern):
            raise ValueError(f"row length mismatch: {guess!r} / {pattern!r}")
        for pos, (ch, tile) in enumerate(zip(guess, pattern)):
            if tile == CORRECT:
                out[ch] = Correct(pos)
            elif tile == PRESENT:
                out[ch] = Present(pos)
            elif tile == ABSENT:
                out[ch] = Absent()
            else:
                raise ValueError(f"unknown tile {tile!r} in pattern {pattern!r}")
    return out
