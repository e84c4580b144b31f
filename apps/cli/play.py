# apps/cli/play.py
"""
Play one simulated game and report the outcome.

  python -m apps.cli.play --answer crane
  python -m apps.cli.play --answer crane --solver greedy_candidates -v

Prints "Solved: <word> in <n> round(s)" or "Failed: <ErrorKind> (...)".
Exit status is 0 on a solve, 1 otherwise.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordhunt.config import Settings, WORD_LENGTH, MAX_GUESSES
from wordhunt.datasets import WordCorpus, validate_wordlist, pretty_summary
from wordhunt.harness import Session, SimulatedGame
from wordhunt.solvers import create_solver, get_solver_ids

DEFAULT_WORDS = "wordhunt/datasets/data/words_5.txt"


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordhunt: play one game against a hidden word")
    ap.add_argument("--answer", required=True, help="hidden word (must be in the word list)")
    ap.add_argument("--words", default=DEFAULT_WORDS, help="path to the dictionary")
    ap.add_argument("--solver", default="dual_mode",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--max-guesses", type=int, default=MAX_GUESSES)
    ap.add_argument("--settle-delay", type=float, default=0.0,
                    help="seconds to wait after each submitted guess")
    ap.add_argument("--policy", choices=["skip", "reject"], default="skip",
                    help="what to do with malformed dictionary lines")
    ap.add_argument("-v", "--verbose", action="store_true", help="log each round")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    settings = Settings(word_length=args.N, max_guesses=args.max_guesses,
                        settle_delay=args.settle_delay, corpus_policy=args.policy)

    print(pretty_summary(validate_wordlist(settings.word_length, args.words)))
    corpus = WordCorpus.load(args.words, N=settings.word_length, policy=settings.corpus_policy)

    game = SimulatedGame(args.answer.strip().lower(), corpus,
                         max_guesses=settings.max_guesses, settle_delay=settings.settle_delay)
    session = Session(corpus, game, game, create_solver(args.solver), settings)
    result = session.run()

    for (guess, patt), mode in zip(game.rows, result.modes):
        print(f"  {guess}  {patt}  [{mode}]")
    print(result.describe())
    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
