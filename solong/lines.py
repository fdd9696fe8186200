"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 5


class LineReader(Generic[AnyStr]):
    """Splits a text or binary stream into lines, each kept with its newline."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def _take_line(self) -> AnyStr | None:
        stash = self._stash
        if not stash:
            return None
        newline = "\n" if isinstance(stash, str) else b"\n"
        index = stash.find(newline)
        if index < 0:
            return None
        self._stash = stash[index + 1:]
        return stash[: index + 1]

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            line = self._take_line()
            if line is not None:
                return line
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._stash = None
                raise
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk
        rest = self._stash
        self._stash = None
        return rest or None

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.readline, None)


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read every line of a text file, newlines kept."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream))