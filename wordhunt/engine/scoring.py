"""
Tile feedback for a single (guess, answer) pair.

This is what the game board shows after a guess, one tile per letter:
  - 'G' : correct letter in the correct position
  - 'Y' : letter is in the answer but elsewhere
  - '-' : letter not in the answer (or already used up by other tiles)

Multiplicities follow the board: greens are assigned first, then yellows
consume whatever copies of a letter the answer has left. So a doubled
guess letter can show one green tile and one gray tile.
"""

from collections import Counter

CORRECT, PRESENT, ABSENT = "G", "Y", "-"


def score(guess: str, answer: str) -> str:
    """
    Feedback pattern for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    if len(guess) != len(answer):
        raise ValueError(f"guess/answer length mismatch: {guess!r} vs {answer!r}")

    tiles = [ABSENT] * len(guess)

    # greens, and a tally of the answer letters they did not use
    unused = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            tiles[i] = CORRECT
        else:
            unused[a] += 1

    for i, g in enumerate(guess):
        if tiles[i] != CORRECT and unused[g] > 0:
            tiles[i] = PRESENT
            unused[g] -= 1

    return "".join(tiles)


def is_solved(pattern: str) -> bool:
    return bool(pattern) and set(pattern) == {CORRECT}
