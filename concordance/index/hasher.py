"""Polynomial string hash used as the concordance lookup key.

Responsibilities:
- Map token text to a deterministic 32-bit signed integer key.
- Reproduce fixed-width wraparound arithmetic (Java ``String.hashCode``).
"""

from __future__ import annotations

_HASH_MULTIPLIER = 31
_WORD_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def hash_word(word: str) -> int:
    """Return the 32-bit polynomial hash of ``word``'s bytes.

    The accumulator starts at zero and each byte ``b`` updates it as
    ``h = 31 * h + b`` modulo ``2**32``; the result is read back as a signed
    32-bit integer.
    """

    value = 0
    for byte in word.encode("utf-8"):
        value = (_HASH_MULTIPLIER * value + byte) & _WORD_MASK
    if value & _SIGN_BIT:
        return value - (_WORD_MASK + 1)
    return value
