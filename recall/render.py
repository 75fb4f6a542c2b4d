"""Render pages as Rich renderables.

A page is drawn as a bordered panel: the page name on top, a legend with
the navigation keys and a page counter at the bottom, and a two-column
table in between. The shortcut column is exactly as wide as the widest
shortcut on the current page; the description column takes the rest.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from rich import box
from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from recall.models import Config, Page, ThemeColors

SEPARATOR = "+"
COLUMN_SPACING = 2


@dataclass(frozen=True)
class PageLayout:
    title: Text
    legend: Text
    rows: tuple[tuple[Text, str], ...]
    shortcut_width: int


def _key_style(theme: ThemeColors) -> Style:
    return Style(color=theme.highlight, bold=True)


def build_shortcut(tokens: Sequence[str], theme: ThemeColors) -> Text:
    """Join *tokens* into one line of bold keys separated by ``+``.

    Keys use the highlight color; the separators are plain primary color.
    No tokens give an empty line.
    """
    shortcut = Text()
    if not tokens:
        return shortcut

    key_style = _key_style(theme)
    separator_style = Style(color=theme.primary)

    shortcut.append(tokens[0], style=key_style)
    for token in tokens[1:]:
        shortcut.append(SEPARATOR, style=separator_style)
        shortcut.append(token, style=key_style)
    return shortcut


def shortcut_column_width(shortcuts: Iterable[Text]) -> int:
    """Widest shortcut in terminal cells (bold adds no width)."""
    return max((shortcut.cell_len for shortcut in shortcuts), default=0)


def build_title(page: Page, theme: ThemeColors) -> Text:
    return Text(f"[ {page.name} ]", style=_key_style(theme))


def build_legend(theme: ThemeColors, index: int, page_count: int) -> Text:
    """Key hints plus a 1-based ``[Page i of N]`` counter."""
    key = Style(color=theme.highlight)
    label = Style(color=theme.primary)
    return Text.assemble(
        (" <Left> ", key),
        ("Previous Page", label),
        (" <Right> ", key),
        ("Next Page", label),
        (" <q> ", key),
        ("Close", label),
        (f" [Page {index + 1} of {page_count}] ", key),
    )


def layout_page(config: Config, index: int) -> PageLayout:
    """Compute title, legend, rows and column width for page *index*."""
    page = config.pages[index]
    theme = config.theme

    rows = tuple(
        (build_shortcut(entry.shortcut, theme), entry.description) for entry in page.entries
    )
    return PageLayout(
        title=build_title(page, theme),
        legend=build_legend(theme, index, config.page_count),
        rows=rows,
        shortcut_width=shortcut_column_width(shortcut for shortcut, _ in rows),
    )


def build_table(layout: PageLayout, theme: ThemeColors) -> Table:
    table = Table(
        show_header=False,
        box=None,
        expand=True,
        pad_edge=False,
        padding=(0, COLUMN_SPACING // 2),
    )
    # No shortcut on the page: drop the column so its gap doesn't indent rows.
    has_shortcuts = layout.shortcut_width > 0
    if has_shortcuts:
        table.add_column("Shortcut", width=layout.shortcut_width, no_wrap=True)
    table.add_column("Description", ratio=1, overflow="fold")

    description_style = Style(color=theme.primary)
    for shortcut, description in layout.rows:
        cells = (shortcut,) if has_shortcuts else ()
        table.add_row(*cells, Text(description, style=description_style))
    return table


def _render_empty(theme: ThemeColors, height: int | None) -> Panel:
    key = Style(color=theme.highlight)
    label = Style(color=theme.primary)
    message = Group(
        Align.center(Text("No configuration loaded", style=_key_style(theme))),
        Align.center(
            Text.assemble(
                ("Add pages to your config file or run ", label),
                ("recall init", key),
                (" to create an example.", label),
            )
        ),
    )
    return Panel(
        message,
        title=Text("[ recall ]", style=_key_style(theme)),
        subtitle=Text.assemble((" <q> ", key), ("Close ", label)),
        border_style=label,
        box=box.SQUARE,
        padding=(0, 1),
        height=height,
    )


def render_frame(config: Config, index: int, *, height: int | None = None) -> RenderableType:
    """Return the renderable for page *index* of *config*.

    A config without pages renders an informational panel instead of a table.
    """
    theme = config.theme
    if not config.pages:
        return _render_empty(theme, height)

    layout = layout_page(config, index)
    return Panel(
        build_table(layout, theme),
        title=layout.title,
        title_align="center",
        subtitle=layout.legend,
        subtitle_align="center",
        border_style=Style(color=theme.primary),
        box=box.SQUARE,
        padding=(0, 1),
        height=height,
    )
