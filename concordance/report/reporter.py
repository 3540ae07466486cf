"""Concordance report rendering.

Responsibilities:
- Render one `<word><line summary>` line per record.
- Yield report lines without header, footer, or blank separators.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..models.datatypes import ConcordanceRecord


def render_record(record: ConcordanceRecord) -> str:
    """Render one record as its word followed by its line markers."""

    return f"{record.word}{record.line_summary}"


def render_report(records: Iterable[ConcordanceRecord]) -> Iterator[str]:
    """Yield one rendered line per record, in the given order."""

    for record in records:
        yield render_record(record)

