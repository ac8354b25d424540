"""String splitting, trimming, comparison and chunked line reading."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_CHUNK_SIZE = 20

_BLANKS = " \t\n"
_BLANK_RUN = re.compile(r"[ \t\n]+")


def split(text: str, sep: str) -> list[str]:
    """Split text on a single separator character, dropping empty pieces.

    Raises ValueError if sep is not exactly one character.
    """
    if len(sep) != 1:
        raise ValueError("the separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def split_whitespace(text: str) -> list[str]:
    """Split text on runs of spaces, tabs and newlines.

    Other whitespace characters, such as carriage returns, are kept inside words.
    """
    return [piece for piece in _BLANK_RUN.split(text) if piece]


def trim(text: str) -> str:
    """Remove spaces, tabs and newlines from both ends of text."""
    return text.strip(_BLANKS)


def _fold(char: str) -> int:
    code = ord(char)
    # Only the letters strictly between 'A' and 'Z' are folded.
    if ord("A") < code < ord("Z"):
        return code + 32
    return code


def compare_ignore_case(first: str, second: str, limit: int) -> int:
    """Compare at most limit characters, folding upper case letters B to Y.

    Returns the difference of the first pair of characters that differ,
    with the end of a string counting as code 0, or 0 when no difference
    is found within the limit.
    """
    for position in range(max(limit, 0)):
        left = _fold(first[position]) if position < len(first) else 0
        right = _fold(second[position]) if position < len(second) else 0
        if left != right:
            return left - right
        if left == 0:
            return 0
    return 0


class LineReader(Generic[AnyStr]):
    """Read newline-terminated lines from a stream in fixed-size chunks.

    Works with text streams (lines are str) and binary streams (lines are
    bytes).  Lines are returned without their newline.
    """

    def __init__(self, stream: IO[AnyStr], chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError("chunk size must be at least 1")
        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer: AnyStr | None = None

    def _newline(self) -> AnyStr:
        return "\n" if isinstance(self._buffer, str) else b"\n"  # type: ignore[return-value]

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while self._buffer is None or self._newline() not in self._buffer:
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                break
            self._buffer = chunk if self._buffer is None else self._buffer + chunk
        if not self._buffer:
            return None
        line, _, rest = self._buffer.partition(self._newline())
        self._buffer = rest
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line