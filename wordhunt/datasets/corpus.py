"""
The word corpus: the authoritative, read-only dictionary for a session.

A corpus is loaded once and handed to every consumer by reference. Words
keep their source order (candidate ordering and tie-breaks depend on it);
membership checks go through a frozenset.

Malformed-entry policy:
  - "skip"   : drop the entry, log it at DEBUG
  - "reject" : raise CorpusError naming the line
Blank lines are never entries, so a trailing newline is harmless.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Tuple, Union

from wordhunt.config import WORD_LENGTH, CORPUS_POLICIES
from wordhunt.errors import CorpusError
from .io import read_lines, numbered_entries

log = logging.getLogger(__name__)

Source = Union[str, Path, Iterable[str]]


def is_well_formed(word: str, N: int) -> bool:
    """Exactly N characters, all lowercase a-z."""
    return len(word) == N and word.isascii() and word.isalpha() and word.islower()


class WordCorpus:
    __slots__ = ("_words", "_index", "_N")

    def __init__(self, words: Iterable[str], N: int = WORD_LENGTH):
        ordered = tuple(dict.fromkeys(words))
        bad = [w for w in ordered if not is_well_formed(w, N)]
        if bad:
            raise CorpusError(f"not {N}-letter lowercase words: {bad[:5]}")
        if not ordered:
            raise CorpusError("corpus is empty")
        self._words: Tuple[str, ...] = ordered
        self._index: FrozenSet[str] = frozenset(ordered)
        self._N = N

    @classmethod
    def load(cls, source: Source, *, N: int = WORD_LENGTH, policy: str = "skip") -> "WordCorpus":
        """
        Build a corpus from a path (newline-delimited text) or an iterable of lines.
        """
        if policy not in CORPUS_POLICIES:
            raise ValueError(f"policy must be one of {CORPUS_POLICIES}; got {policy!r}")

        lines = read_lines(source) if isinstance(source, (str, Path)) else source

        kept = []
        skipped = 0
        for lineno, token in numbered_entries(lines):
            if is_well_formed(token, N):
                kept.append(token)
            elif policy == "reject":
                raise CorpusError(f"line {lineno}: {token!r} is not a {N}-letter lowercase word")
            else:
                skipped += 1
                log.debug("skipping malformed entry on line %d: %r", lineno, token)

        if skipped:
            log.info("skipped %d malformed dictionary entr%s", skipped, "y" if skipped == 1 else "ies")
        return cls(kept, N=N)

    @property
    def N(self) -> int:
        return self._N

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordCorpus(N={self._N}, size={len(self._words)})"
