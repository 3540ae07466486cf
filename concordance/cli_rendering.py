"""CLI output and error rendering helpers.

Standard output carries only report lines; every failure message goes to
standard error.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NoReturn

import typer

from .errors import ConcordanceStageError
from .models.datatypes import ConcordanceRecord
from .report.reporter import render_report


def echo_report(records: Iterable[ConcordanceRecord]) -> None:
    """Print one report line per record to standard output."""

    for line in render_report(records):
        typer.echo(line)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print the failure on stderr and exit with code 1."""

    if not isinstance(exc, ConcordanceStageError):
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    typer.secho(exc.describe(command_name), fg=typer.colors.RED, err=True)
    if exc.hint:
        typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc
