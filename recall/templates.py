"""Example config document written by ``recall init``."""

from __future__ import annotations

import json
import re
from pathlib import Path

from recall._log import get_logger
from recall.loader import RECALL_SECTION
from recall.models import Config, Entry, Page

logger = get_logger("templates")

# Theme colors can be named colors, which have no ANSI index to write back;
# the example always uses bright white / bright cyan.
EXAMPLE_PRIMARY_COLOR = 15
EXAMPLE_HIGHLIGHT_COLOR = 14

EXAMPLE_CONFIG = Config(
    pages=(
        Page(
            name="General",
            entries=(
                Entry(
                    name="Copy",
                    shortcut=("Ctrl", "C"),
                    description="Copies the current selection.",
                ),
                Entry(name="RecallClose", shortcut=("q",), description="Closes recall"),
            ),
        ),
        Page(name="EmptyPage"),
    ),
)

_BARE_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")
_YAML_WORDS = {"y", "n", "yes", "no", "true", "false", "on", "off", "null"}
# YAML 1.1 printable set, minus what json.dumps already escapes
_NON_PRINTABLE = re.compile(
    r"[^\t\n\r\x20-\x7e\x85\xa0-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _escape_char(match: re.Match[str]) -> str:
    code = ord(match.group())
    if code <= 0xFF:
        return f"\\x{code:02x}"
    return f"\\u{code:04x}"


def _quote(value: str) -> str:
    """Double-quoted YAML scalar; characters YAML won't accept raw are escaped."""
    return _NON_PRINTABLE.sub(_escape_char, json.dumps(value, ensure_ascii=False))


def _key(name: str) -> str:
    if _BARE_KEY.match(name) and name.lower() not in _YAML_WORDS:
        return name
    return _quote(name)


def _entry_line(entry: Entry) -> str:
    content = ", ".join(_quote(key) for key in entry.shortcut)
    return (
        f"  {_key(entry.name)}: {{content: [{content}], "
        f"description: {_quote(entry.description)}}}"
    )


def render_example_config(config: Config) -> str:
    """Serialize *config* as YAML, annotated with one-time usage hints."""
    lines = [
        "# Global settings for recall",
        f"{RECALL_SECTION}:",
        "  # Colors are 0-255 numbers from the ANSI color table",
        f"  primary_color: {EXAMPLE_PRIMARY_COLOR}",
        f"  highlight_color: {EXAMPLE_HIGHLIGHT_COLOR}",
        "",
    ]

    page_hint = content_hint = description_hint = empty_hint = False

    for page in config.pages:
        if not page_hint:
            lines.append("# Every other top-level key defines a new page")
            lines.append("# The name of the page is the key")
            page_hint = True

        if not page.entries:
            if not empty_hint:
                lines.append("# Empty pages are also allowed (but useless)")
                empty_hint = True
            lines.append(f"{_key(page.name)}: {{}}")
            lines.append("")
            continue

        lines.append(f"{_key(page.name)}:")
        for entry in page.entries:
            if entry.shortcut and not content_hint:
                lines.append('  # "content" takes a list of keys needed for the shortcut')
                content_hint = True
            if entry.description and not description_hint:
                lines.append('  # "description" says what the entry does')
                description_hint = True
            lines.append(_entry_line(entry))
        lines.append("")

    return "\n".join(lines)


def write_example_config(path: Path, config: Config = EXAMPLE_CONFIG) -> Path:
    """Write the example document to *path*.

    Raises ``FileExistsError`` if something already exists there.
    """
    logger.info("Creating example config in %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with path.open("x", encoding="utf-8") as f:
            f.write(render_example_config(config))
    except FileExistsError as e:
        raise FileExistsError(f"Path {path} already exists!") from e
    return path
