from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 dictionary file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def numbered_entries(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, token) for every non-blank line, 1-based.
    Blank lines (including the usual trailing one) are not entries.
    """
    for lineno, raw in enumerate(lines, start=1):
        token = raw.strip()
        if token:
            yield lineno, token
