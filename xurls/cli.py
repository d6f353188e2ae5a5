"""Command that prints every URL found in files or standard input."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .patterns import RELAXED, STRICT, strict_matching_scheme

_USAGE = (
    "Usage: xurls [-h] [files]\n"
    "\n"
    "If no files are given, it reads from standard input.\n"
    "\n"
    "   -m <regexp>   only match urls whose scheme matches a regexp\n"
    "                    example: 'https?://|mailto:'\n"
    "   -r            also match urls without a scheme (relaxed)\n"
)


class _Parser(argparse.ArgumentParser):
    def format_usage(self) -> str:
        return _USAGE

    def format_help(self) -> str:
        return _USAGE

    def print_help(self, file=None) -> None:
        super().print_help(file or sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="xurls")
    parser.add_argument("-m", dest="matching", default="", metavar="regexp")
    parser.add_argument("-r", dest="relaxed", action="store_true")
    parser.add_argument("files", nargs="*")
    return parser


def _scan(pattern, lines: TextIO, out: TextIO) -> None:
    for line in lines:
        for word in line.split():
            for match in pattern.finditer(word):
                out.write(match.group() + "\n")


def scan_path(pattern, path: str, out: TextIO) -> None:
    """Write every match of *pattern* in the file at *path* to *out*.

    The path "-" stands for standard input. Text is split into words on
    whitespace and each word is searched on its own.
    """
    if path == "-":
        _scan(pattern, sys.stdin, out)
        return
    with open(path, encoding="utf-8", errors="replace") as handle:
        _scan(pattern, handle, out)


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.relaxed and args.matching:
        return _fail("-r and -m at the same time don't make much sense")
    pattern = STRICT
    if args.relaxed:
        pattern = RELAXED
    elif args.matching:
        try:
            pattern = strict_matching_scheme(args.matching)
        except ValueError as err:
            return _fail(str(err))
    for path in args.files or ["-"]:
        try:
            scan_path(pattern, path, sys.stdout)
        except OSError as err:
            return _fail(str(err))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())