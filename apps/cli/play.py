# apps/cli/play.py
"""
CLI entry point for wordle-cli.

  wordle-cli                       play today's word (English)
  wordle-cli -l de                 play with the German dictionary
  wordle-cli import -s FILE -i de  extend a dictionary from a file or URL
  wordle-cli -l de check           validate a dictionary's word list
"""

from __future__ import annotations

import argparse
import logging
import sys

from colorama import just_fix_windows_console

from wordle_cli import __version__
from wordle_cli.config import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, normalize_language
from wordle_cli.dictionary import get_dictionary, validate_wordlist, pretty_summary
from wordle_cli.engine import evaluate, score_strict
from wordle_cli.game import ConsoleGuesses, play_game, render_feedback, render_plain, welcome
from wordle_cli.maintenance import do_import


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle-cli",
                                 description="Play wordle, a word guessing game!")
    ap.add_argument("-l", "--language", default=DEFAULT_LANGUAGE,
                    help=f"language of the dictionary that will be loaded "
                         f"(one of: {', '.join(SUPPORTED_LANGUAGES)})")
    ap.add_argument("--home", help="data directory (default: $WORDLE_CLI_HOME or ~/.wordle_cli)")
    ap.add_argument("--strict-duplicates", action="store_true",
                    help="never mark a letter present more often than the word holds it")
    ap.add_argument("--no-color", action="store_true",
                    help="print G/Y/- patterns instead of colored letters")
    ap.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = ap.add_subparsers(dest="command")

    imp = sub.add_parser("import", help="extend the dictionary")
    imp.add_argument("-s", "--source-file", required=True,
                     help="file or http(s) URL to import; entries separated by newlines")
    imp.add_argument("-i", "--import-language", required=True,
                     help="language of the dictionary to import into")

    sub.add_parser("check", help="validate the word list of --language")
    return ap


def _cmd_import(args, ap: argparse.ArgumentParser) -> int:
    try:
        lang = normalize_language(args.import_language)
    except ValueError as e:
        ap.error(str(e))
    try:
        summary = do_import(args.source_file, lang, home=args.home)
    except FileNotFoundError as e:
        print(f"Import source not found: {e}", file=sys.stderr)
        return 1
    print(f"Imported {summary['added']} new word(s) into '{lang}' "
          f"({summary['skipped']} skipped).")
    return 0


def _cmd_check(lang: str, home) -> int:
    dictionary = get_dictionary(lang, home=home)
    rep = validate_wordlist(str(dictionary.words_path), dictionary.word_length, lang)
    print(pretty_summary(rep))
    return 0 if rep["passed"] else 1


def _cmd_play(lang: str, args) -> int:
    print(welcome())
    dictionary = get_dictionary(lang, home=args.home)
    try:
        play_game(
            dictionary,
            ConsoleGuesses(),
            lang=lang,
            evaluator=score_strict if args.strict_duplicates else evaluate,
            render=render_plain if args.no_color else render_feedback,
        )
    except (EOFError, KeyboardInterrupt):
        print("\nInput closed, game aborted.")
        return 1
    return 0


def main(argv=None) -> int:
    """
    Parse CLI args, configure logging, and dispatch to play / import / check.
    """
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="[%(levelname)s] %(message)s")
    just_fix_windows_console()

    if args.command == "import":
        return _cmd_import(args, ap)

    try:
        lang = normalize_language(args.language)
    except ValueError as e:
        ap.error(str(e))

    if args.command == "check":
        return _cmd_check(lang, args.home)
    return _cmd_play(lang, args)


if __name__ == "__main__":
    sys.exit(main())
