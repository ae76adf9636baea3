# apps/cli/run.py
"""
Batch replay of a fixed guess script.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the lexicon and picks the targets (all words, or a seeded sample).
  3) Replays the same guesses against every target with a progress bar and
     writes:
       - CSV:  one row per target, guess/pattern history columns
       - JSON: manifest with config, word list report, summary

Usage:
    python -m apps.cli.run --guesses crane,slate,pouty --sample 200
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordle.datasets import DEFAULT_WORDLIST, Lexicon, pretty_summary, validate_wordlist
from wordle.engine import GameConfig
from wordle.errors import LoadError
from wordle.harness import run_script
from wordle.harness.io import timestamp_id, write_csv, write_manifest

logger = logging.getLogger("apps.cli.run")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordle: replay a guess script over many targets")
    ap.add_argument("--guesses", required=True,
                    help="comma-separated guesses, played in order each game")
    ap.add_argument("--words", default=str(DEFAULT_WORDLIST),
                    help="word list (targets are drawn from it, guesses checked against it)")
    ap.add_argument("--length", type=int, default=5, help="word length")
    ap.add_argument("--max-guesses", type=int, default=6, help="guess budget")
    ap.add_argument("--sample", type=int, help="replay against a seeded sample of targets")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    # 1) Word list report
    rep = validate_wordlist(args.length, args.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning(issue)

    # 2) Lexicon and targets
    try:
        config = GameConfig(word_length=args.length, max_guesses=args.max_guesses)
        lexicon = Lexicon.load(args.words, word_length=config.word_length)
    except (LoadError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    if not len(lexicon):
        print(f"error: no {config.word_length}-letter words in {args.words}", file=sys.stderr)
        return 1

    guesses = [g.strip() for g in args.guesses.split(",") if g.strip()]
    targets = list(lexicon)
    if args.sample and args.sample < len(targets):
        rng = random.Random(args.seed)
        rng.shuffle(targets)
        targets = targets[: args.sample]

    # 3) Replay
    with tqdm(total=len(targets), ncols=80, desc="Replaying", unit="game",
              disable=(args.progress == "off")) as bar:
        results = run_script(lexicon, targets, guesses, config=config,
                             on_result=lambda _r: bar.update(1))

    won = sum(1 for r in results if r["success"])
    rejected = sum(r["rejected"] for r in results)
    if rejected:
        logger.warning("%d scripted guess(es) were rejected across all games", rejected)
    print(f"Solved {won}/{len(results)} targets with {len(guesses)} scripted guess(es)")

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_guesses=config.max_guesses, N=config.word_length)
    write_manifest({
        "run_id": run_id,
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solved": won,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
