"""Build the page/entry model from a parsed config document.

The document is a mapping of top-level sections. The reserved ``recall``
section holds optional global settings (colors); every other section is a
page, mapping entry identifiers to ``{content: [...], description: ...}``.
Section and entry order is kept exactly as written.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.color import Color

from recall._log import get_logger
from recall._yaml import read_document
from recall.models import (
    DEFAULT_HIGHLIGHT_COLOR,
    DEFAULT_PRIMARY_COLOR,
    Config,
    Entry,
    Page,
    ThemeColors,
)
from recall.schema import EntryDocument, GlobalSettings

logger = get_logger("loader")

RECALL_SECTION = "recall"


class ConfigError(Exception):
    """Raised when a parsed document does not describe valid pages."""


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def _require_str_key(key: object, what: str) -> str:
    if not isinstance(key, str):
        raise ConfigError(
            f"{what} {key!r} must be a string; quote it in the config file (e.g. \"{key}\")"
        )
    return key


def build_theme(section: Any) -> ThemeColors:
    """Resolve theme colors from the ``recall`` section, falling back to defaults."""
    if section is None:
        return ThemeColors()
    if not isinstance(section, Mapping):
        raise ConfigError(
            f"Invalid global settings [{RECALL_SECTION}]: expected a mapping, "
            f"got {type(section).__name__}"
        )
    try:
        settings = GlobalSettings.model_validate(dict(section))
    except ValidationError as e:
        raise ConfigError(f"Invalid global settings [{RECALL_SECTION}]: {_describe(e)}") from e

    primary = (
        Color.from_ansi(settings.primary_color)
        if settings.primary_color is not None
        else DEFAULT_PRIMARY_COLOR
    )
    highlight = (
        Color.from_ansi(settings.highlight_color)
        if settings.highlight_color is not None
        else DEFAULT_HIGHLIGHT_COLOR
    )
    return ThemeColors(primary=primary, highlight=highlight)


def build_entry(page_name: str, entry_name: str, raw: Any) -> Entry:
    """Validate one entry record of *page_name*."""
    if not isinstance(raw, Mapping):
        raise ConfigError(
            f"Page '{page_name}', entry '{entry_name}': expected a mapping with "
            f"'content' and 'description', got {type(raw).__name__}"
        )
    try:
        doc = EntryDocument.model_validate(dict(raw))
    except ValidationError as e:
        raise ConfigError(f"Page '{page_name}', entry '{entry_name}': {_describe(e)}") from e
    return Entry(name=entry_name, shortcut=tuple(doc.content), description=doc.description)


def build_page(name: str, raw: Any) -> Page:
    """Build a page from its section; a ``null`` section is an empty page."""
    if raw is None:
        return Page(name=name)
    if not isinstance(raw, Mapping):
        raise ConfigError(
            f"Page '{name}': expected a mapping of entries, got {type(raw).__name__}"
        )
    entries = tuple(
        build_entry(name, _require_str_key(key, f"Entry in page '{name}'"), value)
        for key, value in raw.items()
    )
    return Page(name=name, entries=entries)


def build_config(document: Mapping[str, Any]) -> Config:
    """Turn a parsed document into a :class:`Config`.

    Raises :class:`ConfigError` naming the offending section, page or entry.
    """
    theme = ThemeColors()
    pages: list[Page] = []
    for key, value in document.items():
        if key == RECALL_SECTION:
            theme = build_theme(value)
            continue
        pages.append(build_page(_require_str_key(key, "Page name"), value))
    return Config(theme=theme, pages=tuple(pages))


def load_config(path: Path) -> Config:
    """Read, parse and validate the config file at *path*."""
    logger.info("Reading config from %s", path)
    config = build_config(read_document(path))
    logger.debug("Loaded %d page(s) from %s", config.page_count, path)
    return config
