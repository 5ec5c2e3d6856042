"""
Extend a language's word list from a newline-separated source.

The source is either a local text file or an http(s) URL. Entries are folded
for the target language; anything that is not a clean word of the configured
length, or is already stored, is skipped.

Usage:
    wordle-cli import --source-file words.txt --import-language de
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, List

import requests
from tqdm import tqdm

from wordle_cli.dictionary import get_dictionary
from wordle_cli.dictionary.io import read_lines

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_source(source: str) -> List[str]:
    """
    Return the non-blank lines of `source`.

    Raises FileNotFoundError for a missing file and requests.HTTPError for a
    failed download.
    """
    if _is_url(source):
        r = requests.get(source, timeout=30)
        r.raise_for_status()
        lines = r.text.splitlines()
    else:
        lines = read_lines(Path(source).expanduser())
    return [ln.strip() for ln in lines if ln.strip()]


def do_import(source: str, lang: str, home: Path | str | None = None,
              *, progress: bool | None = None) -> Dict:
    """
    Import `source` into the `lang` dictionary.

    Args:
        source:   file path or http(s) URL
        lang:     target language tag (must be supported)
        home:     data home override
        progress: show a progress bar (default: only on a terminal)

    Returns:
        dict with keys lang, source, read, added, skipped
    """
    dictionary = get_dictionary(lang, home=home)
    entries = read_source(source)

    if progress is None:
        progress = sys.stderr.isatty()

    added = dictionary.add_words(
        tqdm(entries, desc=f"Importing {dictionary.lang}", unit="word",
             ncols=80, disable=not progress)
    )

    summary = {
        "lang": dictionary.lang,
        "source": source,
        "read": len(entries),
        "added": added,
        "skipped": len(entries) - added,
    }
    logger.info("Imported %(added)d of %(read)d entries from %(source)s into '%(lang)s'",
                summary)
    return summary
