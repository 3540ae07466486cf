"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic diagnostic lines through `loguru`.
- Keep diagnostics off standard output, which carries only the report.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger

_LOGURU_LEVELS = {"error": "ERROR", "debug": "DEBUG"}


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/", "'"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic diagnostic lines for one concordance run.

    ``diagnostics`` selects the threshold: `off` installs no sink at all,
    `error` keeps only failure and data-loss events, `debug` adds stage
    transitions and one line per indexed occurrence.
    """

    def __init__(self, sink: TextIO | None = None, diagnostics: str = "off") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        self._diagnostics = diagnostics
        _loguru_logger.remove()
        level = _LOGURU_LEVELS.get(diagnostics)
        if level is not None:
            _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    @property
    def debug_enabled(self) -> bool:
        """Return whether per-occurrence debug events are emitted."""

        return self._diagnostics == "debug"

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured diagnostic line."""

        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_stage_start(self, stage: str) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage)

    def log_stage_complete(self, stage: str) -> None:
        """Emit a stage-complete runtime event."""

        self._emit("INFO", "complete", stage)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure runtime event without sensitive payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

    def log_word_rejected(self, word: str, capacity: int) -> None:
        """Emit an event for a token dropped for exceeding the word capacity."""

        self._emit(
            "ERROR", "word_rejected", "index", word=word, length=len(word), capacity=capacity
        )

    def log_summary_truncated(self, word: str, length: int, line_number: int) -> None:
        """Emit an event for a line marker dropped by a full line summary."""

        self._emit(
            "ERROR",
            "summary_truncated",
            "index",
            word=word,
            length=length,
            line=line_number,
        )

    def log_upsert(self, key: int, word: str, line_number: int, *, created: bool) -> None:
        """Emit a debug event for one indexed occurrence."""

        self._emit(
            "DEBUG",
            "upsert",
            "index",
            key=key,
            word=word,
            line=line_number,
            created="true" if created else "false",
        )

    def log_record_count(self, count: int) -> None:
        """Emit a debug event with the number of distinct records."""

        self._emit("DEBUG", "record_count", "index", records=count)
