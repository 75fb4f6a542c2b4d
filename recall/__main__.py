"""Module entrypoint for ``python -m recall``."""

from __future__ import annotations

from recall.cli.main import app_entry

if __name__ == "__main__":  # pragma: no cover
    app_entry()
