"""Core domain models for pages of shortcuts."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.color import Color

DEFAULT_PRIMARY_COLOR = Color.parse("white")
DEFAULT_HIGHLIGHT_COLOR = Color.parse("cyan")


@dataclass(frozen=True)
class Entry:
    """One row of a page.

    ``name`` is the identifier from the config document; it keeps entries
    unique within a page and is never displayed.
    """

    name: str
    shortcut: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class Page:
    """Named, ordered group of entries shown as one screen."""

    name: str
    entries: tuple[Entry, ...] = ()


@dataclass(frozen=True)
class ThemeColors:
    primary: Color = DEFAULT_PRIMARY_COLOR
    highlight: Color = DEFAULT_HIGHLIGHT_COLOR


@dataclass(frozen=True)
class Config:
    """Everything loaded from a config file."""

    theme: ThemeColors = field(default_factory=ThemeColors)
    pages: tuple[Page, ...] = ()

    @property
    def page_count(self) -> int:
        return len(self.pages)
