"""Centralized logging for Recall."""

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path

_lock = threading.Lock()
_setup_done = False


class _Formatter(logging.Formatter):
    """Format log records as ``[tag] message``, stripping the ``recall.`` prefix."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("recall."):
            name = name[len("recall.") :]
        record.msg = f"[{name}] {record.msg}"
        return super().format(record)


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure the ``recall`` root logger (idempotent).

    Attaches a single handler with level WARNING (or DEBUG when *verbose*
    is True). The handler writes to *log_file* when given, otherwise to
    ``sys.stderr``; the TUI owns the screen, so a file is the only way to
    read debug output while it runs. Sets ``propagate = False`` so messages
    don't bubble to the root logger.
    """
    global _setup_done
    with _lock:
        if _setup_done:
            return
        logger = logging.getLogger("recall")
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
        if log_file is not None:
            handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
        logger.propagate = False
        _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(f"recall.{name}")``.

    Lazily calls :func:`setup_logging` on first use so that log output
    is routed to stderr even when callers skip explicit setup.
    """
    setup_logging()
    return logging.getLogger(f"recall.{name}")
