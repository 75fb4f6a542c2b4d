"""Main Textual App for Recall."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import events
from textual.app import App
from textual.binding import Binding
from textual.widget import Widget

from recall._log import get_logger
from recall.events import dispatch_key
from recall.navigation import NavigationState, Reason
from recall.render import render_frame

if TYPE_CHECKING:
    from rich.console import RenderableType
    from textual.app import ComposeResult

    from recall.models import Config

logger = get_logger("tui")


class PageView(Widget):
    """Full-screen view of the current page, re-rendered on every refresh."""

    DEFAULT_CSS = """
    PageView {
        height: 1fr;
    }
    """

    def __init__(self, config: Config, state: NavigationState) -> None:
        super().__init__(id="page-view")
        self._config = config
        self._state = state

    def render(self) -> RenderableType:
        return render_frame(
            self._config, self._state.current_index, height=self.size.height or None
        )


class RecallApp(App[Reason]):
    """Pages through the shortcuts of a config, one page per screen."""

    TITLE = "Recall"
    ENABLE_COMMAND_PALETTE = False

    # ctrl+c must reach the dispatcher rather than textual's own handling
    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", show=False, priority=True),
    ]

    def __init__(self, config: Config) -> None:
        super().__init__()
        self.recall_config = config
        self.navigation = NavigationState(config.page_count)

    def compose(self) -> ComposeResult:
        yield PageView(self.recall_config, self.navigation)

    def on_key(self, event: events.Key) -> None:
        self.handle_key(event.key)

    def action_interrupt(self) -> None:
        self.handle_key("ctrl+c")

    def handle_key(self, key: str) -> None:
        transitions = dispatch_key(key)
        if not transitions:
            return
        for transition in transitions:
            self.navigation.apply(transition)

        reason = self.navigation.quit_reason
        if reason is not None:
            logger.info("Quitting due to: %s", reason.text())
            self.exit(reason)
            return
        self.query_one(PageView).refresh()
