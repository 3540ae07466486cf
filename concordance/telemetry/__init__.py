"""Telemetry and observability helpers.

This package emits opt-in diagnostic events for concordance runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
