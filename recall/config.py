"""Centralized path configuration for Recall.

Respects ``RECALL_CONFIG_DIR`` env var, then ``XDG_CONFIG_HOME/recall``,
and falls back to the platform's per-user config directory.
"""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path

CONFIG_FILE_NAME = "config.yaml"


class PathResolutionError(Exception):
    """Raised when the config location cannot be determined or read."""


@lru_cache(maxsize=1)
def get_config_dir() -> Path:
    """Return the Recall config directory.

    Resolution order:
    1. ``RECALL_CONFIG_DIR`` environment variable
    2. ``XDG_CONFIG_HOME/recall`` (if ``XDG_CONFIG_HOME`` is set)
    3. ``%APPDATA%/recall`` on Windows, ``~/Library/Application Support/recall``
       on macOS, ``~/.config/recall`` elsewhere
    """
    env = os.environ.get("RECALL_CONFIG_DIR")
    if env:
        return Path(env)
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "recall"
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "recall"

    try:
        home = Path.home()
    except RuntimeError as e:
        raise PathResolutionError(f"No valid config directory found: {e}") from e

    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "recall"
    return home / ".config" / "recall"


def default_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME
