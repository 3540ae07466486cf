"""Alphabetical ordering of concordance records."""

from __future__ import annotations

from collections.abc import Iterable

from ..models.datatypes import ConcordanceRecord


def sort_records(records: Iterable[ConcordanceRecord]) -> list[ConcordanceRecord]:
    """Return records in ascending byte-wise order of their word.

    Tokens are lowercase ASCII, so code-point order equals byte order. Equal
    words keep their input order.
    """

    return sorted(records, key=lambda record: record.word)
