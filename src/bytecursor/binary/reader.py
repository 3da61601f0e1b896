from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from .cursor import ByteCursor, OutOfBounds

log = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


class ParseError(ValueError):
    def __init__(self, message: str, offset: Optional[int] = None):
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)


# -----------------------------
# Loading
# -----------------------------

def _load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    data = p.read_bytes()
    log.debug("loaded %d bytes from %s", len(data), p)
    return data


def open_cursor(inp: BytesLike) -> ByteCursor:
    """Cursor positioned at the start of a file or in-memory buffer."""
    return ByteCursor(_load_bytes(inp))


# -----------------------------
# Strict helpers for format parsers
# -----------------------------

@contextmanager
def parse_guard(cur: ByteCursor, what: str = "data") -> Iterator[ByteCursor]:
    """
    Turn an OutOfBounds escaping the block into a ParseError that names
    what was being parsed and where the failing read started.
    """
    start = cur.tell()
    try:
        yield cur
    except OutOfBounds as e:
        log.debug("bounds failure parsing %s started at %d: %s", what, start, e)
        raise ParseError(f"truncated {what}: needed {e.needed} byte(s)", offset=e.offset) from e


def read_exact(cur: ByteCursor, n: int, what: str = "field") -> bytes:
    """Like cur.take(n), but a short read is an error and does not move the cursor."""
    if cur.remaining() < n:
        raise ParseError(f"truncated {what}: need {n}, have {cur.remaining()}", offset=cur.tell())
    return cur.take(n)


def expect_magic(cur: ByteCursor, magic: bytes, what: str = "magic") -> None:
    if not cur.starts_with(magic):
        found = cur.peek(len(magic))
        raise ParseError(f"bad {what}: expected {magic!r}, found {found!r}", offset=cur.tell())
    cur.advance(len(magic))
