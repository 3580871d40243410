"""Command line: load key/value pairs from standard input, then answer lookups."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import BinaryIO, TextIO

from hotrace.hashmap import HashMap
from hotrace.lines import read_lines

NOT_FOUND_SUFFIX = b": Not found.\n"


class UnexpectedEOF(Exception):
    """Input ended in the middle of the key/value section."""

    def __init__(self) -> None:
        super().__init__("Unexpected EOF")


def parse_pairs(lines: Iterator[bytes], table: HashMap, err: TextIO) -> None:
    """Read alternating key and value lines from *lines* into *table*.

    An empty key line ends the section. An empty value line also ends it,
    after a warning on *err*. Running out of lines raises UnexpectedEOF.
    """
    while True:
        key = next(lines, None)
        if key is None:
            raise UnexpectedEOF
        if not key:
            return
        value = next(lines, None)
        if value is None:
            raise UnexpectedEOF
        if not value:
            print("Unexpected empty line", file=err)
            return
        table.insert(key, value)


def format_result(query: bytes, value: bytes | None) -> bytes:
    """Return the output line for *query*, given the value found or None."""
    if value is None:
        return query + NOT_FOUND_SUFFIX
    return value + b"\n"


def run_searches(lines: Iterator[bytes], table: HashMap, out: BinaryIO) -> None:
    """Look up every non-empty line of *lines* and write the result to *out*."""
    for query in lines:
        if query:
            out.write(format_result(query, table.get(query)))


def main(argv: list[str] | None = None) -> int:
    """Run the lookup program on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="hotrace",
        description=(
            "Read key/value line pairs until an empty line, "
            "then print the value for each following key."
        ),
    )
    parser.parse_args(argv)

    lines = read_lines(sys.stdin.buffer)
    table = HashMap()
    try:
        parse_pairs(lines, table, sys.stderr)
    except UnexpectedEOF as exc:
        print(exc, file=sys.stderr)
        return 1

    out = sys.stdout.buffer
    run_searches(lines, table, out)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())