"""
Word-list validator for wordle-cli.

What this module does:
- Validate one language's word list (one entry per line).
- Enforce formatting rules after locale folding (alphabetic, exact length N).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordle_cli.dictionary import validate_wordlist, pretty_summary
    rep = validate_wordlist("~/.wordle_cli/de/words.txt", 5, "de")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordle_cli.lang import replace_unicode


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for a single word list."""
    path: str            # file path (as given)
    lang: str            # language tag used for folding
    N: int               # required word length
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after folding
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def is_valid_word(word: str, N: int) -> bool:
    """A folded entry is usable iff it is alphabetic with exact length N."""
    return len(word) == N and word.isalpha() and word.isascii()


def _load_and_check(path: Path, N: int, lang: str) -> Tuple[List[str], int]:
    """
    Load words from a text file and fold them for `lang`.

    Rules:
      - one token per line
      - must be alphabetic a-z after folding
      - must have exact length N after folding
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = replace_unicode(raw.strip(), lang)
            if is_valid_word(w, N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, N: int, lang: str) -> Dict:
    """
    Validate a word list for length N in language `lang`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport) with counts,
        SHA-256, a strict `passed` flag (non-empty, no invalid lines, no
        duplicates) and `issues` describing every problem found.
    """
    p = Path(path).expanduser()

    if not p.exists():
        rep = WordListReport(str(path), lang, N, False, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N, lang)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    rep = WordListReport(
        path=str(p),
        lang=lang,
        N=N,
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        lang=en N=5 | words=120 (uniq=120, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"lang={report['lang']} N={report['N']} "
        f"| words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
