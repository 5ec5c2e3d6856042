"""
Scrape past Wordle answers from wordlehints.co.uk and add them to a dictionary.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- Lowercases, de-duplicates while preserving calendar order.
- Imports the answers into the English dictionary, or writes them to --out.

Usage:
    python -m script.extract_wordle_answers
    python -m script.extract_wordle_answers --out answers_en.txt --sort
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from wordle_cli.dictionary import get_dictionary
from wordle_cli.dictionary.io import unique_preserve_order, write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_answers(html: str) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    answers = [m.group(2).lower() for m in ROW_RE.finditer(text)]
    return unique_preserve_order(answers)  # calendar order, no repeats


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Add past Wordle answers to the English dictionary")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--home", help="data directory (default: $WORDLE_CLI_HOME or ~/.wordle_cli)")
    ap.add_argument("--out", help="write the answers to this file instead of importing them")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.sort:
        answers = sorted(answers)

    if args.out:
        write_lines(answers, args.out)
        print(f"Wrote {len(answers)} unique answers -> {args.out}")
        return

    added = get_dictionary("en", home=args.home).add_words(answers)
    print(f"Scraped {len(answers)} answers, added {added} new word(s) to 'en'")

if __name__ == "__main__":
    main()
