"""Command-line interface for Concordance.

Responsibilities:
- Read the input text from standard input and print the sorted concordance.
- Take no arguments or options; limits and diagnostics are compiled in.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import typer

from .cli_rendering import echo_report, exit_with_command_error
from .config import ConcordanceConfig
from .pipeline import ConcordancePipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="concordance",
    add_completion=False,
    help="Print each distinct word of standard input with the lines it occurs on.",
)


@app.command()
def concordance_command() -> None:
    """Build a concordance of standard input and print it to standard output."""

    config = ConcordanceConfig()
    try:
        pipeline = ConcordancePipeline(
            config=config,
            run_logger=RunLogger(diagnostics=config.diagnostics),
        )
        records = pipeline.run(typer.get_binary_stream("stdin"))
    except Exception as exc:
        exit_with_command_error("concordance", exc)

    echo_report(records)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
