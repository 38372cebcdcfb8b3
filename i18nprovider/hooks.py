"""Scoped hook / event system connecting locale selection to providers.

Handlers subscribe to an ``(event, scope)`` pair. ``scope`` is usually a
client token, so an event emitted for one client only reaches the providers
serving that client. Handlers registered without a scope only receive events
emitted without one.
"""

from collections.abc import Callable

LOCALE_CHANGED = "locale.changed"

_handlers: dict[tuple[str, str | None], list[Callable]] = {}


def on(event: str, handler: Callable, scope: str | None = None) -> None:
    """Register a handler for an event within a scope."""
    _handlers.setdefault((event, scope), []).append(handler)


def off(event: str, handler: Callable, scope: str | None = None) -> None:
    """Remove a handler; drop the scope entry once it has no handlers left."""
    handlers = _handlers.get((event, scope))
    if not handlers or handler not in handlers:
        return
    handlers.remove(handler)
    if not handlers:
        del _handlers[(event, scope)]


def emit(event: str, scope: str | None = None, **kwargs) -> None:
    """Call every handler subscribed to ``event`` in ``scope``."""
    for handler in list(_handlers.get((event, scope), [])):
        handler(**kwargs)


def subscribers(event: str, scope: str | None = None) -> int:
    return len(_handlers.get((event, scope), []))


def clear() -> None:
    """Remove all handlers. Useful for testing."""
    _handlers.clear()
