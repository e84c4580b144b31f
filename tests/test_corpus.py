from pathlib import Path

import pytest
from wordhunt.datasets import WordCorpus
from wordhunt.errors import CorpusError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_from_file_drops_trailing_blank(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "stare"])
    corpus = WordCorpus.load(p)
    assert corpus.words == ("crane", "raise", "stare")
    assert len(corpus) == 3
    assert "crane" in corpus and "trace" not in corpus


def test_load_skip_policy_drops_malformed():
    lines = ["crane", "Raise", "cranes", "st4re", "", "  trace  ", "crane"]
    corpus = WordCorpus.load(lines, policy="skip")
    # malformed entries dropped, whitespace trimmed, duplicates kept once
    assert list(corpus) == ["crane", "trace"]


def test_load_reject_policy_names_the_line():
    with pytest.raises(CorpusError, match="line 2"):
        WordCorpus.load(["crane", "Raise", "stare"], policy="reject")


def test_reject_policy_still_ignores_blank_lines():
    corpus = WordCorpus.load(["crane", "stare", ""], policy="reject")
    assert len(corpus) == 2


def test_unknown_policy():
    with pytest.raises(ValueError):
        WordCorpus.load(["crane"], policy="lenient")


def test_empty_corpus_is_an_error():
    with pytest.raises(CorpusError):
        WordCorpus.load(["", "toolong"])


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordCorpus.load(tmp_path / "nope.txt")


def test_corpus_is_read_only():
    corpus = WordCorpus(["crane", "stare"])
    with pytest.raises(AttributeError):
        corpus.extra = 1
    assert isinstance(corpus.words, tuple)


def test_other_word_lengths():
    corpus = WordCorpus.load(["planet", "crane", "palate"], N=6)
    assert corpus.N == 6
    assert list(corpus) == ["planet", "palate"]


def test_bundled_wordlist_loads_strictly():
    p = Path(__file__).resolve().parents[1] / "wordhunt" / "datasets" / "data" / "words_5.txt"
    corpus = WordCorpus.load(p, policy="reject")
    assert len(corpus) > 100
