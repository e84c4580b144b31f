"""
Run settings shared by the solver loop, the simulated game and the CLIs.

Defaults mirror the daily five-letter puzzle. The CLIs build a Settings
from argparse flags; nothing is read from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass

WORD_LENGTH = 5
MAX_GUESSES = 6
CORPUS_POLICIES = ("skip", "reject")


@dataclass(frozen=True)
class Settings:
    word_length: int = WORD_LENGTH
    max_guesses: int = MAX_GUESSES
    settle_delay: float = 0.0      # seconds to wait after a delivered guess
    corpus_policy: str = "skip"    # what to do with malformed dictionary lines

    def __post_init__(self) -> None:
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be positive; got {self.max_guesses}")
        if self.settle_delay < 0:
            raise ValueError(f"settle_delay must be >= 0; got {self.settle_delay}")
        if self.corpus_policy not in CORPUS_POLICIES:
            raise ValueError(
                f"corpus_policy must be one of {CORPUS_POLICIES}; got {self.corpus_policy!r}")
