"""Tests for the example config writer."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.color import Color

from recall.loader import load_config
from recall.models import Config, Entry, Page
from recall.templates import (
    EXAMPLE_CONFIG,
    EXAMPLE_HIGHLIGHT_COLOR,
    EXAMPLE_PRIMARY_COLOR,
    render_example_config,
    write_example_config,
)


class TestRenderExampleConfig:
    def test_contains_settings_and_pages(self):
        text = render_example_config(EXAMPLE_CONFIG)
        assert "recall:\n" in text
        assert f"primary_color: {EXAMPLE_PRIMARY_COLOR}" in text
        assert f"highlight_color: {EXAMPLE_HIGHLIGHT_COLOR}" in text
        assert "General:\n" in text
        assert 'Copy: {content: ["Ctrl", "C"], description: "Copies the current selection."}' in text
        assert "EmptyPage: {}" in text

    def test_hints_written_once(self):
        config = Config(
            pages=(
                Page("One", (Entry("a", ("x",), "first"),)),
                Page("Two", (Entry("b", ("y",), "second"),)),
                Page("Empty1"),
                Page("Empty2"),
            )
        )
        text = render_example_config(config)
        assert text.count("defines a new page") == 1
        assert text.count('"content" takes') == 1
        assert text.count('"description" says') == 1
        assert text.count("Empty pages are also allowed") == 1

    def test_awkward_names_are_quoted(self):
        config = Config(pages=(Page("My Page", (Entry("yes", (), 'say "hi"'),)),))
        text = render_example_config(config)
        assert '"My Page":' in text
        assert '"yes": {content: [], description: "say \\"hi\\""}' in text


class TestWriteExampleConfig:
    def test_written_file_loads_back(self, tmp_path):
        path = write_example_config(tmp_path / "nested" / "config.yaml")
        config = load_config(path)

        assert [p.name for p in config.pages] == ["General", "EmptyPage"]
        general = config.pages[0]
        assert general.entries == (
            Entry("Copy", ("Ctrl", "C"), "Copies the current selection."),
            Entry("RecallClose", ("q",), "Closes recall"),
        )
        assert config.pages[1].entries == ()
        assert config.theme.primary == Color.from_ansi(EXAMPLE_PRIMARY_COLOR)
        assert config.theme.highlight == Color.from_ansi(EXAMPLE_HIGHLIGHT_COLOR)

    def test_quoted_names_load_back(self, tmp_path):
        config = Config(pages=(Page("My Page", (Entry("yes", (), 'say "hi"'),)),))
        path = write_example_config(tmp_path / "config.yaml", config)
        loaded = load_config(path)
        assert loaded.pages == config.pages

    def test_refuses_to_overwrite(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("mine: {}\n")
        with pytest.raises(FileExistsError, match="already exists"):
            write_example_config(path)
        assert path.read_text() == "mine: {}\n"

    def test_non_printable_characters_load_back(self, tmp_path):
        config = Config(pages=(Page("Keys", (Entry("del", ("a\x7f",), "x\x80y\x9f"),)),))
        path = write_example_config(tmp_path / "config.yaml", config)
        assert "\\x7f" in path.read_text(encoding="utf-8")
        loaded = load_config(path)
        assert loaded.pages == config.pages

    def test_refuses_file_created_after_check(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("mine: {}\n")
        monkeypatch.setattr(Path, "exists", lambda self: False)
        with pytest.raises(FileExistsError, match="already exists"):
            write_example_config(path)
        assert path.read_text() == "mine: {}\n"
