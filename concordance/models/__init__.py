"""Shared typed data models for Concordance.

This package contains dataclasses used across index and report modules to
avoid cross-module coupling and circular imports.
"""

from .datatypes import ConcordanceRecord, LineSummary, line_marker

__all__ = ["ConcordanceRecord", "LineSummary", "line_marker"]
