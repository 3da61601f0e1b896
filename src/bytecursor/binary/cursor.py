from __future__ import annotations
from typing import Iterable, Union

BytesInput = Union[bytes, bytearray, memoryview, Iterable[int]]


class OutOfBounds(IndexError):
    """A strict read asked for bytes the buffer does not have."""

    def __init__(self, offset: int, needed: int, size: int):
        self.offset = offset
        self.needed = needed
        self.size = size
        super().__init__(f"out of bounds: need {needed} at {offset}, buffer size {size}")

    def __reduce__(self):
        return type(self), (self.offset, self.needed, self.size)


class ByteCursor:
    """
    Read cursor over an immutable byte buffer.

    Exploratory reads (peek, take, advance) truncate at the end of the buffer.
    Exact reads (next, take_into_*, byte_at, slice, indexing) raise OutOfBounds
    and leave the position untouched.
    """
    __slots__ = ("_buf", "_pos")

    def __init__(self, data: BytesInput):
        if isinstance(data, int): raise TypeError("expected a byte sequence, got int")
        # bytes are adopted as-is, mutable inputs are copied
        self._buf = data if isinstance(data, bytes) else bytes(data)
        self._pos = 0

    @classmethod
    def from_bytes(cls, data: BytesInput) -> "ByteCursor":
        return cls(data)

    # state
    @property
    def buffer(self) -> bytes: return self._buf
    @property
    def position(self) -> int: return self._pos
    @property
    def is_end(self) -> bool: return self._pos == len(self._buf)

    def tell(self) -> int: return self._pos
    def remaining(self) -> int: return len(self._buf) - self._pos
    def rest(self) -> bytes: return self._buf[self._pos:]
    def __len__(self) -> int: return len(self._buf)

    def __repr__(self) -> str:
        return f"ByteCursor(position={self._pos}, length={len(self._buf)})"

    def seek(self, pos: int) -> None:
        if not (0 <= pos <= len(self._buf)): raise OutOfBounds(pos, 0, len(self._buf))
        self._pos = pos

    def reset(self) -> None: self._pos = 0

    # absolute access
    def byte_at(self, index: int) -> int:
        if not (0 <= index < len(self._buf)): raise OutOfBounds(index, 1, len(self._buf))
        return self._buf[index]

    def slice(self, start: int, end: int) -> bytes:
        if start < 0 or start > end or end > len(self._buf):
            raise OutOfBounds(start, max(end - start, 0), len(self._buf))
        return self._buf[start:end]

    def __getitem__(self, key):
        if isinstance(key, slice):
            if key.step not in (None, 1): raise ValueError("stepped slices are not supported")
            start = 0 if key.start is None else key.start
            end = len(self._buf) if key.stop is None else key.stop
            return self.slice(start, end)
        return self.byte_at(key)

    # relative movement
    def advance(self, n: int) -> None:
        _check_count(n)
        self._pos = min(self._pos + n, len(self._buf))

    skip = advance

    def rewind(self, n: int) -> None:
        _check_count(n)
        self._pos = max(self._pos - n, 0)

    def prev(self) -> None: self.rewind(1)

    def __iadd__(self, n: int) -> "ByteCursor":
        self.advance(n)
        return self

    def __isub__(self, n: int) -> "ByteCursor":
        self.rewind(n)
        return self

    # relative reads
    def peek(self, n: int) -> bytes:
        _check_count(n)
        return self._buf[self._pos:self._pos + n]

    def take(self, n: int) -> bytes:
        out = self.peek(n)
        self._pos += len(out)
        return out

    def next(self) -> int:
        if self._pos >= len(self._buf): raise OutOfBounds(self._pos, 1, len(self._buf))
        val = self._buf[self._pos]
        self._pos += 1
        return val

    def starts_with(self, prefix: bytes) -> bool:
        return self.peek(len(prefix)) == bytes(prefix)

    # fixed-width unsigned reads, little-endian unless asked otherwise
    def take_uint(self, size: int, byteorder: str = "little") -> int:
        if size <= 0: raise ValueError("size must be positive")
        if byteorder not in ("little", "big"): raise ValueError(f"bad byteorder {byteorder!r}")
        if self.remaining() < size: raise OutOfBounds(self._pos, size, len(self._buf))
        return int.from_bytes(self.take(size), byteorder, signed=False)

    def take_into_u8(self) -> int: return self.take_uint(1)
    def take_into_u16(self) -> int: return self.take_uint(2)
    def take_into_u32(self) -> int: return self.take_uint(4)
    def take_into_u64(self) -> int: return self.take_uint(8)

    def snapshot(self):
        from ..models.state import CursorState
        return CursorState.of(self)


def _check_count(n: int) -> None:
    if n < 0: raise ValueError(f"byte count must be non-negative, got {n}")
