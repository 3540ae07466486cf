"""Unit tests for record ordering and report rendering."""

from __future__ import annotations

from concordance.index import ConcordanceIndex
from concordance.models import ConcordanceRecord, LineSummary
from concordance.report import render_record, render_report, sort_records


def _record(word: str, text: str, key: int = 0) -> ConcordanceRecord:
    """Build a record with a pre-rendered line summary."""

    return ConcordanceRecord(key=key, word=word, line_summary=LineSummary(text=text))


def test_sort_records_orders_words_byte_wise() -> None:
    """Apostrophes sort before letters and prefixes before longer words."""

    index = ConcordanceIndex()
    for word in ("don't", "dog's", "dogs", "dog", "apple", "zebra"):
        index.upsert(word, 1)

    ordered = [record.word for record in sort_records(index.all_records())]

    assert ordered == ["apple", "dog", "dog's", "dogs", "don't", "zebra"]


def test_sort_records_keeps_input_order_for_equal_words() -> None:
    """Records with identical words should retain their relative order."""

    first = _record("same", " 1", key=1)
    second = _record("same", " 2", key=2)

    assert sort_records([first, second]) == [first, second]


def test_render_record_concatenates_word_and_summary() -> None:
    """Report lines should be the word immediately followed by its markers."""

    assert render_record(_record("apple", " 3 7 21")) == "apple 3 7 21"


def test_render_report_yields_one_line_per_record_in_order() -> None:
    """Report rendering should add no header, footer or blank separator lines."""

    records = [_record("cats", " 1 2"), _record("chase", " 1 2")]

    assert list(render_report(records)) == ["cats 1 2", "chase 1 2"]
    assert list(render_report([])) == []
