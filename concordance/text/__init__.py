"""Text preprocessing components.

This package turns raw input lines into lowercase word tokens before they are
indexed.
"""

from .normalizer import LineNormalizer, normalize_line
from .tokenizer import tokenize

__all__ = ["LineNormalizer", "normalize_line", "tokenize"]
