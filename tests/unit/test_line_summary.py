"""Unit tests for the bounded line-summary value type."""

from __future__ import annotations

from concordance.models import LineSummary, line_marker


def test_line_marker_is_space_prefixed_decimal() -> None:
    """Markers should render as a space followed by the line number."""

    assert line_marker(21) == " 21"


def test_append_keeps_insertion_order_and_skips_duplicates() -> None:
    """Appending an already present line should leave the summary unchanged."""

    summary = LineSummary()

    assert summary.append(3) is True
    assert summary.append(7) is True
    assert summary.append(7) is False

    assert str(summary) == " 3 7"
    assert summary.line_numbers() == [3, 7]


def test_append_treats_marker_prefix_of_existing_number_as_present() -> None:
    """Duplicate detection is a substring test on the rendered summary."""

    summary = LineSummary()
    summary.append(12)

    assert summary.append(1) is False
    assert str(summary) == " 12"


def test_append_stops_once_limit_is_reached() -> None:
    """No marker should be appended once the rendered length reaches the limit."""

    summary = LineSummary(capacity=20, margin=4)

    for line_number in range(1, 20):
        summary.append(line_number)

    assert summary.limit == 16
    assert summary.is_full
    assert summary.line_numbers() == [1, 2, 3, 4, 5, 6, 7, 8]
    assert len(summary) == 16
    assert summary.append(99) is False


def test_default_bound_truncates_after_limit_crossing_append() -> None:
    """Default bound should allow appends while the length is below 16519 bytes."""

    summary = LineSummary()

    for line_number in range(1, 5001):
        summary.append(line_number)

    assert summary.limit == 16519
    assert summary.line_numbers()[-1] == 3526
    assert len(summary) == 16523
    assert str(summary) == "".join(f" {number}" for number in range(1, 3527))
