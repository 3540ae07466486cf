"""Shared pytest fixtures for the full Concordance test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

_FILES_DIR = Path(__file__).parent / "files"


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Drop loguru sinks installed by a test so they never outlive its streams."""

    yield
    logger.remove()


@pytest.fixture
def sample_input_bytes() -> bytes:
    """Provide the raw bytes of the multi-line sample input fixture."""

    return (_FILES_DIR / "sample_input.txt").read_bytes()


@pytest.fixture
def sample_expected_report() -> str:
    """Provide the expected sorted report for the sample input fixture."""

    return (_FILES_DIR / "sample_expected.txt").read_text(encoding="ascii")
