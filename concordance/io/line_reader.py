"""Line-by-line reading of the input byte stream.

Responsibilities:
- Split a binary stream into raw lines on `\\n` or end of stream.
- Number lines from 1, counting blank lines too.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO


def iter_numbered_lines(stream: BinaryIO) -> Iterator[tuple[int, bytes]]:
    """Yield ``(line_number, raw_line)`` pairs until the stream is exhausted.

    Raw lines keep their trailing newline; the last line may lack one.
    """

    for line_number, raw_line in enumerate(stream, start=1):
        yield line_number, raw_line
