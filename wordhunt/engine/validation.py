"""
Guess validation.

A guess may be submitted iff it has the same shape the corpus loader
accepts (N lowercase a-z letters) and the corpus contains it. Submitters
call this before delivering anything.
"""

from typing import Container

from wordhunt.datasets.corpus import is_well_formed


def validate_guess(word: str, corpus: Container[str], N: int) -> bool:
    """
    Return True if `word` is a valid guess.

    `corpus` only needs membership (a WordCorpus or a set); no per-call
    set is built.
    """
    if not isinstance(word, str):
        return False
    return is_well_formed(word, N) and word in corpus
