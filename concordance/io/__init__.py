"""Input stream components for Concordance."""

from .line_reader import iter_numbered_lines

__all__ = ["iter_numbered_lines"]
