"""Command line entry point: parse a score file and write out its structure."""

from __future__ import annotations

import argparse
import pprint
import sys
from pathlib import Path
from typing import Optional, Sequence

from vecscore.data import Score
from vecscore.parser import ParseError, parse_score

DEFAULT_INPUT = "sample.vsc"
DEFAULT_OUTPUT = "output.txt"


def format_score(score: Score) -> str:
    """Render a parsed score as a readable, indented report."""
    return f"Parsed Score:\n{pprint.pformat(score)}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vecscore",
        description="Parse a score file and write its structure to a text file.",
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="score file to read")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT, help="file to write the parsed score to"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the input score, print it and save it; return the exit status."""
    args = _build_parser().parse_args(argv)

    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading file {args.input}: {exc}", file=sys.stderr)
        return 1

    try:
        score = parse_score(text)
    except ParseError as exc:
        print(f"Parse error: {exc}", file=sys.stderr)
        return 1

    formatted = format_score(score)
    print(formatted)
    try:
        Path(args.output).write_text(formatted, encoding="utf-8")
    except OSError as exc:
        print(f"File write error: {exc}", file=sys.stderr)
        return 1
    print(f"Score successfully written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())