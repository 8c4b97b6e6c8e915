"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

BUFFER_SIZE = 1000


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its trailing newline.

    The stream is read ``buffer_size`` units at a time. A last line with
    no newline is yielded as it is; an empty stream yields nothing.
    Both text and binary streams are accepted.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = None
    newline = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        if pending is None:
            newline = "\n" if isinstance(chunk, str) else b"\n"
            pending = chunk
        else:
            pending += chunk
        start = 0
        while True:
            cut = pending.find(newline, start)
            if cut < 0:
                break
            yield pending[start:cut + 1]
            start = cut + 1
        pending = pending[start:]
    if pending:
        yield pending