"""Domain exceptions for concordance runs."""

from __future__ import annotations


class ConcordanceStageError(RuntimeError):
    """Raised when the `config`, `read` or `sort` stage of a run fails.

    Oversized words and full line summaries are not errors; the index drops
    them silently.
    """

    def __init__(self, *, stage: str, detail: str, hint: str | None = None) -> None:
        """Record the failing stage, a readable detail and an optional hint."""

        super().__init__(f"{stage}: {detail}")
        self.stage = stage
        self.detail = detail
        self.hint = hint

    def describe(self, command_name: str) -> str:
        """Return the one-line failure summary shown for ``command_name``."""

        return f"{command_name} failed at stage `{self.stage}`: {self.detail}"
