"""Splitting a byte stream into newline-terminated lines."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

BUFFER_SIZE = 8192


def read_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Yield each line of a binary *stream* without its trailing newline.

    Empty lines are yielded as ``b""``. A last line that has no newline
    is still yielded; an empty remainder at end of input is not.
    """
    pending = bytearray()
    while chunk := stream.read(BUFFER_SIZE):
        if b"\n" not in chunk:
            pending += chunk
            continue
        head, *middle, tail = chunk.split(b"\n")
        pending += head
        yield bytes(pending)
        yield from middle
        pending = bytearray(tail)
    if pending:
        yield bytes(pending)