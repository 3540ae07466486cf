"""Configuration model for Concordance.

Responsibilities:
- Hold the compiled-in word and line-summary limits.
- Hold the compiled-in diagnostics level for the opt-in stderr trace.

Key types:
- `ConcordanceConfig`: validated settings for one concordance run.
"""

from __future__ import annotations

from dataclasses import dataclass

LONGEST_WORD_LEN = 45
LONGEST_LINE_SUMMARY_LEN = 16535
LINE_SUMMARY_MARGIN = 16
# One of `DIAGNOSTICS_LEVELS`; edit here to trace a run on stderr.
DIAGNOSTICS = "off"

DIAGNOSTICS_LEVELS = ("off", "error", "debug")


@dataclass(frozen=True, slots=True)
class ConcordanceConfig:
    """Runtime configuration for one concordance run.

    Attributes:
        longest_word_len: Longest token length (in bytes) that is indexed.
        longest_line_summary_len: Nominal rendered capacity of a line summary.
        line_summary_margin: Headroom below the capacity at which appends stop.
        diagnostics: Diagnostic log level, one of `off`, `error`, `debug`.
    """

    longest_word_len: int = LONGEST_WORD_LEN
    longest_line_summary_len: int = LONGEST_LINE_SUMMARY_LEN
    line_summary_margin: int = LINE_SUMMARY_MARGIN
    diagnostics: str = DIAGNOSTICS

    def validate(self) -> None:
        """Validate limits and diagnostics level before a run."""

        self._require_positive(self.longest_word_len, "longest_word_len")
        self._require_positive(self.longest_line_summary_len, "longest_line_summary_len")
        if self.line_summary_margin < 0:
            raise ValueError("`line_summary_margin` must not be negative.")
        if self.line_summary_margin >= self.longest_line_summary_len:
            raise ValueError(
                "`line_summary_margin` must be smaller than `longest_line_summary_len`."
            )
        if self.diagnostics not in DIAGNOSTICS_LEVELS:
            supported = ", ".join(DIAGNOSTICS_LEVELS)
            raise ValueError(
                f"Unsupported `diagnostics` value `{self.diagnostics}`; supported: {supported}."
            )

    @property
    def line_summary_limit(self) -> int:
        """Return the rendered summary length at which appends stop."""

        return self.longest_line_summary_len - self.line_summary_margin

    @staticmethod
    def _require_positive(value: int, field_name: str) -> None:
        """Validate that an integer limit is strictly positive."""

        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ValueError(f"`{field_name}` must be a positive integer.")
