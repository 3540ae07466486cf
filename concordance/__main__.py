"""Module entrypoint for running Concordance as ``python -m concordance``."""

from __future__ import annotations

from concordance.cli import main


if __name__ == "__main__":
    main()
