"""Map key presses to navigation transitions."""

from __future__ import annotations

from recall._log import get_logger
from recall.navigation import Decrement, Increment, QuitReason, RequestQuit, Transition

logger = get_logger("events")

_KEYS: dict[str, Transition] = {
    "left": Decrement(),
    "right": Increment(),
    "q": RequestQuit(QuitReason.CLOSE_KEY_PRESSED),
}


def dispatch_key(key: str) -> tuple[Transition, ...]:
    """Return the transitions for a textual key name such as ``"left"`` or ``"ctrl+c"``.

    Modifiers are the ``+``-separated prefixes of *key*. Arrows work with
    any modifier except ctrl, ``q`` only on its own. Unknown keys map to an
    empty tuple.
    """
    *modifiers, code = key.split("+")

    if "ctrl" in modifiers:
        if modifiers == ["ctrl"] and code == "c":
            logger.debug("Handling key %s", key)
            return (RequestQuit(QuitReason.SIGINT),)
    elif code in ("left", "right") or (code == "q" and not modifiers):
        logger.debug("Handling key %s", key)
        return (_KEYS[code],)

    logger.debug("Unused key(s) pressed: %s", key)
    return ()
