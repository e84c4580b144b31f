# apps/cli/run.py
"""
CLI entry point for benchmarking wordhunt solvers.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads the corpus and instantiates the requested solver.
  3) Plays a simulated game for every sampled answer with a live progress
     indicator and writes:
       - CSV:  per-case results + guess/pattern/mode history columns
       - JSON: manifest with config, wordlist hash, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections import Counter
from pathlib import Path
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from wordhunt.config import Settings, WORD_LENGTH, MAX_GUESSES
from wordhunt.datasets import WordCorpus, validate_wordlist, pretty_summary
from wordhunt.harness import run_case
from wordhunt.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordhunt.solvers import create_solver, get_solver_ids

DEFAULT_WORDS = "wordhunt/datasets/data/words_5.txt"


def summarize(results: List[Dict]) -> Dict:
    """Solve rate, round statistics over solved games, and failure kinds."""
    solved = np.array([r["rounds"] for r in results if r["success"]], dtype=float)
    failures = Counter(r["error_kind"] or "WrongAnswer" for r in results if not r["success"])
    return {
        "num_cases": len(results),
        "solved": int(solved.size),
        "solve_rate": (solved.size / len(results)) if results else 0.0,
        "mean_rounds": float(solved.mean()) if solved.size else None,
        "max_rounds": int(solved.max()) if solved.size else None,
        "failures": dict(failures),
    }


def main():
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordhunt: benchmark a solver on simulated games")
    ap.add_argument("--solver", default="dual_mode",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--words", default=DEFAULT_WORDS, help="path to the dictionary")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--max-guesses", type=int, default=MAX_GUESSES)
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--policy", choices=["skip", "reject"], default="skip",
                    help="what to do with malformed dictionary lines")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    settings = Settings(word_length=args.N, max_guesses=args.max_guesses,
                        corpus_policy=args.policy)

    # 1) Validate dictionary and print a one-liner summary
    rep = validate_wordlist(settings.word_length, args.words)
    print(pretty_summary(rep))

    # 2) Load corpus and solver
    corpus = WordCorpus.load(args.words, N=settings.word_length, policy=settings.corpus_policy)
    solver = create_solver(args.solver)

    # 3) Choose cases (deterministic sample by seed)
    rng = np.random.default_rng(args.seed)
    if args.sample and args.sample < len(corpus):
        cases = [str(w) for w in rng.choice(corpus.words, size=args.sample, replace=False)]
    else:
        cases = list(corpus)
    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0
    iterator = tqdm(cases, ncols=80, desc=solver.id, unit="game") if mode == "bar" else cases

    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(solver, ans, corpus=corpus, settings=settings))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(results)
    write_csv(results, str(csv_path), max_turns=settings.max_guesses)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"Solved {summary['solved']}/{summary['num_cases']} "
          f"(mean rounds {summary['mean_rounds']}) | failures: {summary['failures']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
