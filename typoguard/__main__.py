"""Module entrypoint for running typoguard as ``python -m typoguard``."""

from __future__ import annotations

from typoguard.cli import main


if __name__ == "__main__":
    main()
