"""Concordance indexing components.

This package hashes tokens into integer keys and accumulates per-key line
summaries.
"""

from .concordance_index import ConcordanceIndex
from .hasher import hash_word

__all__ = ["ConcordanceIndex", "hash_word"]
