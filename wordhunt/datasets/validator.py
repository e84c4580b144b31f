"""
Dictionary validator for wordhunt.

What this module does:
- Validate one word list (the corpus the solver guesses from).
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

A trailing blank line is normal for newline-terminated files and is not
counted as invalid; blank lines anywhere else are.

Typical use:
    from wordhunt.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "wordhunt/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .corpus import is_well_formed


@dataclass
class WordlistReport:
    """Diagnostics and metadata for a single dictionary file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Returns:
      (valid_words, invalid_count)
    """
    lines = path.read_text(encoding="utf-8").splitlines()
    # drop trailing blanks: they are the file's terminator, not entries
    while lines and not lines[-1].strip():
        lines.pop()

    valid: List[str] = []
    invalid = 0
    for raw in lines:
        w = raw.strip()
        if is_well_formed(w, N):
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        JSON-serializable WordlistReport. `passed` is strict: non-empty,
        no invalid lines, no duplicates.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N=N, path=path, exists=False, count=0, sha256="",
                             unique_count=0, invalid_lines=0,
                             issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if rep.count == 0:
        rep.issues.append("dictionary contains 0 valid words")
    if invalid:
        rep.issues.append(f"dictionary has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("dictionary contains duplicate lines")

    rep.passed = rep.count > 0 and invalid == 0 and rep.count == rep.unique_count
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console output.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
