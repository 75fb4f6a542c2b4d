"""YAML document parsing for config files.

Produces plain, insertion-ordered dicts and knows nothing about pages or
entries; shape checks live in :mod:`recall.loader`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from yaml.constructor import ConstructorError

from recall.config import PathResolutionError


class ParseError(Exception):
    """Raised when a document is not well-formed YAML."""


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects duplicate keys instead of keeping the last one."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen: set[Any] = set()
            for key_node, _ in node.value:
                if key_node.tag == "tag:yaml.org,2002:merge":
                    continue
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    # unhashable key, the base constructor reports it
                    continue
                if duplicate:
                    raise ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def parse_document(text: str) -> dict[str, Any]:
    """Parse YAML *text* into a mapping.

    An empty document yields ``{}``. Raises :class:`ParseError` on malformed
    syntax, duplicate keys, or a top level that is not a mapping.
    """
    try:
        data = yaml.load(text, Loader=_UniqueKeyLoader)  # noqa: S506
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(f"Expected a YAML mapping at the top level, got {type(data).__name__}")
    return data


def read_document(path: Path) -> dict[str, Any]:
    """Read *path* and parse it with :func:`parse_document`."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PathResolutionError(f"Failed to read config from {path}: {e}") from e

    try:
        return parse_document(raw)
    except ParseError as e:
        raise ParseError(f"{path}: {e}") from e
