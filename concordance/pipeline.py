"""Pipeline orchestration for Concordance.

Responsibilities:
- Own the concordance index for one run.
- Drive read -> normalize -> tokenize -> upsert until end of stream, then sort.
- Wrap stages with diagnostic telemetry.

Key types:
- `ConcordancePipeline`: orchestration facade.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import BinaryIO, TypeVar

from .config import ConcordanceConfig
from .errors import ConcordanceStageError
from .index.concordance_index import ConcordanceIndex
from .io.line_reader import iter_numbered_lines
from .models.datatypes import ConcordanceRecord
from .report.sorter import sort_records
from .telemetry.logger import RunLogger
from .text.normalizer import LineNormalizer
from .text.tokenizer import tokenize

_StageResult = TypeVar("_StageResult")


class ConcordancePipeline:
    """Coordinate all stages for a single concordance run."""

    def __init__(
        self,
        config: ConcordanceConfig | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize config and optional runtime logging."""

        self._config = config or ConcordanceConfig()
        self._run_logger = run_logger
        self._normalizer = LineNormalizer()
        self._index: ConcordanceIndex | None = None

    @property
    def index(self) -> ConcordanceIndex | None:
        """Return the index built by the most recent run, if any."""

        return self._index

    def run(self, stream: BinaryIO) -> list[ConcordanceRecord]:
        """Index every line of ``stream`` and return records sorted by word."""

        try:
            self._config.validate()
        except ValueError as exc:
            raise ConcordanceStageError(
                stage="config",
                detail=f"Invalid configuration: {exc}",
                hint="Fix the compiled-in limits or `DIAGNOSTICS` in `concordance/config.py`.",
            ) from exc

        index = ConcordanceIndex(config=self._config, run_logger=self._run_logger)
        self._index = index
        self._run_stage("read", lambda: self._index_stream(stream, index))
        if self._run_logger is not None:
            self._run_logger.log_record_count(len(index))
        return self._run_stage("sort", lambda: sort_records(index.all_records()))

    def _index_stream(self, stream: BinaryIO, index: ConcordanceIndex) -> None:
        """Upsert every token occurrence of ``stream`` into ``index``."""

        try:
            for line_number, raw_line in iter_numbered_lines(stream):
                self.index_line(index, raw_line, line_number)
        except OSError as exc:
            raise ConcordanceStageError(
                stage="read",
                detail=f"Failed to read input stream: {exc}",
                hint="Verify the input is a readable file or pipe.",
            ) from exc

    def index_line(self, index: ConcordanceIndex, raw_line: bytes, line_number: int) -> None:
        """Normalize, tokenize and upsert one raw input line."""

        for token in tokenize(self._normalizer.normalize(raw_line)):
            index.upsert(token, line_number)

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name)
        return result
