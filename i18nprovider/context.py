"""Ambient context channel carrying the provider's capability bundle."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from i18nprovider.source import TranslationMap


@dataclass(frozen=True)
class ContextValue:
    """What descendant components can see and call.

    Instances are never mutated; the provider swaps in a new one so that
    ``locale``, ``get`` and ``match`` always come from the same source.
    """

    locale: str
    get: Callable[[str], str | None]
    match: Callable[[str], TranslationMap | None]
    to_string: Callable[[Any], str]
    register_key: Callable[[str, Any], None]
    unregister_key: Callable[[str], None]


_current: ContextVar[ContextValue | None] = ContextVar("i18n_context", default=None)


def use_i18n() -> ContextValue | None:
    """Return the innermost provided context value, or None outside a provider."""
    return _current.get()


@contextmanager
def provide(value: ContextValue) -> Iterator[ContextValue]:
    """Make ``value`` the ambient context for the duration of the block."""
    token = _current.set(value)
    try:
        yield value
    finally:
        _current.reset(token)
