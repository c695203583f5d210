"""Command line for searching a word list."""

from __future__ import annotations

import argparse
import string
import sys
from pathlib import Path

from wordlehelper.solver import (
    WILDCARD,
    WORD_LENGTH,
    InsufficientInformationError,
    Query,
    load_word_list,
    search,
)

_MAX_EXCLUDED = 30


def _pattern(value: str) -> str:
    if len(value) != WORD_LENGTH or any(
        ch != WILDCARD and ch not in string.ascii_letters for ch in value
    ):
        raise argparse.ArgumentTypeError(
            f"pattern must be {WORD_LENGTH} letters or '{WILDCARD}'"
        )
    return value.lower()


def _excluded(value: str) -> str:
    if len(value) > _MAX_EXCLUDED or any(ch not in string.ascii_letters for ch in value):
        raise argparse.ArgumentTypeError(
            f"excluded letters must be at most {_MAX_EXCLUDED} letters"
        )
    return value


def _not_at(value: str) -> tuple[int, str]:
    position, sep, letters = value.partition("=")
    if not sep or not position.isdigit() or not 1 <= int(position) <= WORD_LENGTH:
        raise argparse.ArgumentTypeError(
            f"expected POS=LETTERS with POS from 1 to {WORD_LENGTH}"
        )
    return int(position), letters


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordlehelper",
        description="List words from a word list that fit what is known.",
    )
    parser.add_argument("words", type=Path, help="word list, one word per line")
    parser.add_argument(
        "-p", "--pattern", type=_pattern, default=WILDCARD * WORD_LENGTH,
        help="known letters, with '.' for unknown positions",
    )
    parser.add_argument(
        "-x", "--exclude", type=_excluded, default="",
        help="letters that do not occur",
    )
    parser.add_argument(
        "-i", "--include", default="", help="letters that occur somewhere",
    )
    parser.add_argument(
        "-n", "--not-at", type=_not_at, action="append", default=[],
        metavar="POS=LETTERS", help="letters that are not at position POS",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the search and print matching words, one per line."""
    args = build_parser().parse_args(argv)
    try:
        words = load_word_list(args.words)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Wordle Word List is Loaded with {len(words)} words!", file=sys.stderr)

    not_at = [""] * WORD_LENGTH
    for position, letters in args.not_at:
        not_at[position - 1] += letters
    query = Query(
        pattern=args.pattern,
        excluded=args.exclude,
        includes=args.include,
        not_at=tuple(not_at),
    )
    try:
        matches = search(words, query)
    except InsufficientInformationError as exc:
        print(f"Insufficient Information: {exc}", file=sys.stderr)
        return 1

    for word in matches:
        print(word)
    print(f"Total {len(matches)} generated,", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())