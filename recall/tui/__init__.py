"""Terminal UI for Recall (requires textual)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recall.models import Config
    from recall.navigation import Reason


def run_tui(config: Config) -> Reason:
    """Run the viewer until the user quits and return why it stopped."""
    from recall.navigation import OtherReason
    from recall.tui.app import RecallApp

    app = RecallApp(config)
    reason = app.run()
    if reason is None:
        return OtherReason("Application exited")
    return reason
