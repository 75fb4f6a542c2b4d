"""Tests for the Textual viewer app."""

from __future__ import annotations

import pytest

from recall.models import Config
from recall.navigation import OtherReason, QuitReason
from recall.tui import run_tui
from recall.tui.app import PageView, RecallApp


@pytest.mark.anyio
async def test_arrows_page_and_q_quits(two_page_config: Config):
    app = RecallApp(two_page_config)
    async with app.run_test() as pilot:
        assert app.query_one(PageView) is not None
        await pilot.press("right")
        assert app.navigation.current_index == 1
        await pilot.press("right")
        assert app.navigation.current_index == 1
        await pilot.press("left")
        assert app.navigation.current_index == 0
        await pilot.press("up", "x")
        assert app.navigation.is_running
        await pilot.press("q")
    assert app.return_value is QuitReason.CLOSE_KEY_PRESSED


@pytest.mark.anyio
async def test_ctrl_c_quits_with_sigint(two_page_config: Config):
    app = RecallApp(two_page_config)
    async with app.run_test() as pilot:
        await pilot.press("ctrl+c")
    assert app.return_value is QuitReason.SIGINT


@pytest.mark.anyio
async def test_empty_config_renders_and_quits():
    app = RecallApp(Config())
    async with app.run_test() as pilot:
        await pilot.press("right", "left")
        assert app.navigation.current_index == 0
        await pilot.press("q")
    assert app.return_value is QuitReason.CLOSE_KEY_PRESSED


class TestRunTui:
    def test_run_tui_without_reason(self, monkeypatch):
        monkeypatch.setattr(RecallApp, "run", lambda self: None)
        assert run_tui(Config()) == OtherReason("Application exited")

    def test_run_tui_passes_reason_through(self, monkeypatch, two_page_config: Config):
        monkeypatch.setattr(RecallApp, "run", lambda self: QuitReason.SIGINT)
        assert run_tui(two_page_config) is QuitReason.SIGINT
