"""Core datatypes shared across Concordance modules.

Responsibilities:
- Represent the per-word state accumulated while indexing.
- Model the bounded line summary as an explicit value type.

Key types:
- `LineSummary`: rendered, deduplicated, length-bounded line markers.
- `ConcordanceRecord`: one distinct key with its word and line summary.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import LINE_SUMMARY_MARGIN, LONGEST_LINE_SUMMARY_LEN


def line_marker(line_number: int) -> str:
    """Render one line number as a space-prefixed decimal marker."""

    return f" {line_number}"


@dataclass(slots=True)
class LineSummary:
    """Rendered run of line markers with a fixed capacity.

    Attributes:
        capacity: Nominal rendered capacity in bytes.
        margin: Headroom kept below ``capacity``; appends stop once the
            rendered length reaches ``capacity - margin``.
        text: Rendered markers, e.g. ``" 3 7 21"``.
    """

    capacity: int = LONGEST_LINE_SUMMARY_LEN
    margin: int = LINE_SUMMARY_MARGIN
    text: str = ""

    @property
    def limit(self) -> int:
        """Return the rendered length at which appends stop."""

        return self.capacity - self.margin

    @property
    def is_full(self) -> bool:
        """Return whether the bound blocks any further marker."""

        return len(self.text) >= self.limit

    def append(self, line_number: int) -> bool:
        """Append a line marker and return whether the summary changed.

        A marker that is already a substring of the summary, or any marker
        once the bound has been reached, is dropped silently.
        """

        if self.is_full:
            return False
        marker = line_marker(line_number)
        if marker in self.text:
            return False
        self.text += marker
        return True

    def line_numbers(self) -> list[int]:
        """Return the recorded line numbers in insertion order."""

        return [int(token) for token in self.text.split()]

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(slots=True)
class ConcordanceRecord:
    """Stored state for one concordance key.

    Attributes:
        key: Integer hash of the word, unique within an index.
        word: Text of the most recent token upserted under ``key``.
        line_summary: Lines on which the key was seen.
    """

    key: int
    word: str
    line_summary: LineSummary = field(default_factory=LineSummary)
