"""Module entrypoint for running pathsearch as ``python -m pathsearch``."""

from __future__ import annotations

from pathsearch.cli import main


if __name__ == "__main__":
    main()
