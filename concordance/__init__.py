"""Top-level package for Concordance.

This package reads a text stream and reports, in alphabetical order, every
distinct word together with the line numbers it occurs on. The main
orchestration entry point is `ConcordancePipeline`.
"""

from .pipeline import ConcordancePipeline

__all__ = ["ConcordancePipeline", "__version__"]

__version__ = "0.1.0"
