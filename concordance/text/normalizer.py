"""Line normalization stage.

Responsibilities:
- Classify every byte of a raw input line as letter, apostrophe, or separator.
- Lowercase ASCII letters and keep the line length unchanged.
"""

from __future__ import annotations

import string

_APOSTROPHE = ord("'")


def _build_translation_table() -> bytes:
    """Return a 256-entry byte table mapping raw bytes to normalized bytes."""

    table = bytearray(b" " * 256)
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        table[ord(upper)] = ord(lower)
        table[ord(lower)] = ord(lower)
    table[_APOSTROPHE] = _APOSTROPHE
    return bytes(table)


_NORMALIZATION_TABLE = _build_translation_table()


def normalize_line(raw: bytes) -> str:
    """Return a lowercase copy of ``raw`` with non-word bytes replaced by spaces.

    Only ASCII letters and the apostrophe survive; digits, punctuation,
    hyphens, whitespace, line terminators and non-ASCII bytes each become a
    single space, so the result has the same length as the input.
    """

    return raw.translate(_NORMALIZATION_TABLE).decode("ascii")


class LineNormalizer:
    """Normalize raw input lines into token-ready text."""

    def normalize(self, raw: bytes) -> str:
        """Normalize one raw line for tokenization."""

        return normalize_line(raw)
