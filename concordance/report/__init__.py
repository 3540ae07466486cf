"""Report ordering and rendering components."""

from .reporter import render_record, render_report
from .sorter import sort_records

__all__ = ["render_record", "render_report", "sort_records"]
