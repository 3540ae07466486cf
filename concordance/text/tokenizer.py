"""Whitespace tokenizer for normalized lines."""

from __future__ import annotations

from collections.abc import Iterator
import re

_TOKEN_PATTERN = re.compile(r"[^ ]+")


def tokenize(normalized_line: str) -> Iterator[str]:
    """Yield non-empty space-separated tokens from left to right.

    Tokens of any length are produced; length limits are enforced by the index.
    """

    for match in _TOKEN_PATTERN.finditer(normalized_line):
        yield match.group(0)
