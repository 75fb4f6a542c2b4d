"""Page navigation and the running/quitting lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class QuitReason(StrEnum):
    SIGINT = "sigint"
    CLOSE_KEY_PRESSED = "close-key-pressed"
    INIT_SUBCOMMAND_COMPLETED = "init-subcommand-completed"

    def text(self) -> str:
        return _REASON_TEXT[self]


_REASON_TEXT = {
    QuitReason.SIGINT: "Received SIGINT signal",
    QuitReason.CLOSE_KEY_PRESSED: "Pressed 'quit' button",
    QuitReason.INIT_SUBCOMMAND_COMPLETED: "Initialization completed",
}


@dataclass(frozen=True)
class OtherReason:
    """Quit reason outside the known set."""

    message: str

    def text(self) -> str:
        return self.message


Reason = QuitReason | OtherReason


@dataclass(frozen=True)
class Running:
    pass


@dataclass(frozen=True)
class Quitting:
    reason: Reason


Lifecycle = Running | Quitting


@dataclass(frozen=True)
class Increment:
    pass


@dataclass(frozen=True)
class Decrement:
    pass


@dataclass(frozen=True)
class RequestQuit:
    reason: Reason


Transition = Increment | Decrement | RequestQuit


class NavigationState:
    """Current page index plus lifecycle.

    The index only moves through :meth:`increment` and :meth:`decrement`,
    which keep it inside ``[0, page_count - 1]``. Once quitting, every
    transition is ignored.
    """

    def __init__(self, page_count: int) -> None:
        if page_count < 0:
            raise ValueError(f"page_count must be >= 0, got {page_count}")
        self._page_count = page_count
        self._index = 0
        self._lifecycle: Lifecycle = Running()

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def lifecycle(self) -> Lifecycle:
        return self._lifecycle

    @property
    def is_running(self) -> bool:
        return isinstance(self._lifecycle, Running)

    @property
    def quit_reason(self) -> Reason | None:
        if isinstance(self._lifecycle, Quitting):
            return self._lifecycle.reason
        return None

    def increment(self) -> None:
        if not self.is_running or self._index >= self._page_count - 1:
            return
        self._index += 1

    def decrement(self) -> None:
        if not self.is_running or self._index == 0:
            return
        self._index -= 1

    def request_quit(self, reason: Reason) -> None:
        if not self.is_running:
            return
        self._lifecycle = Quitting(reason)

    def apply(self, transition: Transition) -> None:
        match transition:
            case Increment():
                self.increment()
            case Decrement():
                self.decrement()
            case RequestQuit(reason=reason):
                self.request_quit(reason)
