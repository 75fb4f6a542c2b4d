"""Shared test fixtures and helpers."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from recall.models import Config, Entry, Page, ThemeColors


def make_page(name: str = "General", *shortcuts: tuple[tuple[str, ...], str]) -> Page:
    """Build a page from ``(keys, description)`` pairs."""
    entries = tuple(
        Entry(name=f"entry-{i}", shortcut=keys, description=description)
        for i, (keys, description) in enumerate(shortcuts)
    )
    return Page(name=name, entries=entries)


def make_config(*pages: Page, theme: ThemeColors | None = None) -> Config:
    """Build a Config with the default theme unless one is given."""
    return Config(theme=theme or ThemeColors(), pages=pages)


@pytest.fixture
def two_page_config() -> Config:
    return make_config(
        make_page(
            "General",
            (("Ctrl", "C"), "Copy"),
            (("Ctrl", "Shift", "C"), "Copy as plain text"),
            ((), "No keys at all"),
        ),
        make_page("Editor", (("Ctrl", "S"), "Save")),
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a small valid config and return its path."""
    p = tmp_path / "config.yaml"
    p.write_text(
        textwrap.dedent("""\
            recall:
              primary_color: 15
              highlight_color: 14
            general:
              copy: {content: ["Ctrl", "C"], description: "Copy"}
              paste: {content: ["Ctrl", "V"], description: "Paste"}
            editor:
              save: {content: ["Ctrl", "S"], description: "Save"}
        """)
    )
    return p


@pytest.fixture
def anyio_backend() -> str:
    """Textual runs on asyncio only."""
    return "asyncio"
