"""
Download past Wordle answers and write them as a word list.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Lowercases, de-duplicates while preserving calendar order, and writes
  one word per line (the format Lexicon.load reads).

Usage:
    python -m script.fetch_wordlist --out wordle/datasets/data/words_5.txt
    python -m script.fetch_wordlist --sort --out words.txt
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from wordle.datasets import unique_preserve_order, write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_answers(html: str) -> list[str]:
    """Pull the answers out of the page, calendar order, no repeats."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Fetch past answers into a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="wordle/datasets/data/words_5.txt")
    ap.add_argument("--sort", action="store_true",
                    help="sort alphabetically instead of keeping calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} unique answers -> {args.out}")


if __name__ == "__main__":
    main()
