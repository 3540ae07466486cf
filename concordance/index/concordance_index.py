"""Hash-keyed concordance index.

Responsibilities:
- Map token hashes to records holding the latest word text and its lines.
- Enforce the word-length capacity and the bounded line-summary policy.

Key types:
- `ConcordanceIndex`: key -> `ConcordanceRecord` map populated via `upsert`.
"""

from __future__ import annotations

from ..config import ConcordanceConfig
from ..models.datatypes import ConcordanceRecord, LineSummary
from ..telemetry.logger import RunLogger
from .hasher import hash_word


class ConcordanceIndex:
    """Accumulate word occurrences keyed by their polynomial hash.

    The hash is trusted as identity: two different words with the same hash
    share one record, and the record's ``word`` is whichever was upserted last.
    """

    def __init__(
        self,
        config: ConcordanceConfig | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize an empty index with limits from ``config``."""

        self._config = config or ConcordanceConfig()
        self._run_logger = run_logger
        self._records: dict[int, ConcordanceRecord] = {}

    def upsert(self, word: str, line_number: int) -> None:
        """Record that ``word`` occurs on ``line_number``.

        Oversized words, duplicate line markers and markers past the summary
        bound are dropped without raising.
        """

        capacity = self._config.longest_word_len
        if len(word) > capacity:
            if self._run_logger is not None:
                self._run_logger.log_word_rejected(word, capacity)
            return

        key = hash_word(word)
        record = self._records.get(key)
        created = record is None
        if record is None:
            record = ConcordanceRecord(
                key=key,
                word=word,
                line_summary=LineSummary(
                    capacity=self._config.longest_line_summary_len,
                    margin=self._config.line_summary_margin,
                ),
            )
            self._records[key] = record
        else:
            record.word = word

        summary = record.line_summary
        if summary.is_full:
            if self._run_logger is not None:
                self._run_logger.log_summary_truncated(word, len(summary), line_number)
            return
        summary.append(line_number)

        if self._run_logger is not None and self._run_logger.debug_enabled:
            self._run_logger.log_upsert(key, word, line_number, created=created)

    def all_records(self) -> list[ConcordanceRecord]:
        """Return an unordered snapshot with one record per stored key."""

        return list(self._records.values())

    def find(self, key: int) -> ConcordanceRecord | None:
        """Return the record stored under ``key``, if any."""

        return self._records.get(key)

    def lookup(self, word: str) -> ConcordanceRecord | None:
        """Return the record that ``word`` hashes to, if any."""

        return self._records.get(hash_word(word))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and hash_word(word) in self._records
