"""LocaleProvider — locale switching, async source loading and key registry."""

import asyncio
import dataclasses
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from i18nprovider import hooks
from i18nprovider import logger as default_logger
from i18nprovider.config import settings
from i18nprovider.context import ContextValue, provide
from i18nprovider.errors import SourceLoadError
from i18nprovider.render import render_component
from i18nprovider.source import DEFAULT_SOURCE, as_source

_log = logging.getLogger(__name__)


def _noop(*args, **kwargs) -> None:
    return None


class LocaleProvider:
    """Supplies translation accessors to every component rendered beneath it.

    The provider owns a ``ContextValue`` and replaces it wholesale whenever a
    locale load completes. Loads are scheduled on the running event loop and
    are never cancelled. With ``latest_request_wins`` (the default) a result is
    dropped once a newer request has been applied, so the last requested
    locale wins; a failed request never blocks an older one that succeeds.
    Without it, the load that resolves last wins.

    ``scope`` ties the provider to one client: it only follows
    ``locale.changed`` events emitted for the same scope.
    """

    def __init__(
        self,
        source: Callable[[str], Awaitable[Any]] | None,
        watch_register: Callable[[dict[str, Any]], None] | None = None,
        children: Any = None,
        locale: str | None = None,
        *,
        debug_tooling_enabled: bool | None = None,
        notify: Callable[[BaseException], None] | None = None,
        renderer: Callable[[Any], str] | None = None,
        latest_request_wins: bool = True,
        scope: str | None = None,
    ):
        self.source = source
        self.watch_register = watch_register
        self.children = children
        self.requested_locale = locale
        self.latest_request_wins = latest_request_wins
        self.scope = scope
        self._notify = notify or default_logger.notify
        self._renderer = renderer or render_component
        self._register: dict[str, Any] = {}
        self._mounted = False
        self._sequence = 0
        self._applied = 0
        self._in_flight: dict[int, str] = {}
        self._pending: set[asyncio.Task] = set()

        if debug_tooling_enabled is None:
            debug_tooling_enabled = settings.debug_tooling_enabled
        self.debug_tooling_enabled = debug_tooling_enabled

        self._value = ContextValue(
            locale=locale or settings.default_locale,
            get=DEFAULT_SOURCE.get,
            match=DEFAULT_SOURCE.match,
            to_string=self.render_to_string,
            register_key=self.register_key if debug_tooling_enabled else _noop,
            unregister_key=self.unregister_key if debug_tooling_enabled else _noop,
        )

    # -- state ---------------------------------------------------------------

    @property
    def context_value(self) -> ContextValue:
        return self._value

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def registry(self) -> dict[str, Any]:
        return dict(self._register)

    # -- key registry --------------------------------------------------------

    def register_key(self, key: str, default: Any) -> None:
        self._register[key] = default
        self._emit_registry()

    def unregister_key(self, key: str) -> None:
        self._register.pop(key, None)
        self._emit_registry()

    def _emit_registry(self) -> None:
        if self.watch_register:
            self.watch_register(dict(self._register))

    # -- rendering -----------------------------------------------------------

    def render_to_string(self, component: Any) -> str:
        """Render ``component`` with the current context. Never raises."""
        try:
            with provide(self._value):
                return self._renderer(component)
        except Exception as e:
            self._notify(e)
            return ""

    def render(self) -> str:
        with provide(self._value):
            return self._renderer(self.children)

    # -- lifecycle -----------------------------------------------------------

    def did_mount(self) -> asyncio.Task | None:
        if self._mounted:
            return None
        self._mounted = True
        hooks.on(hooks.LOCALE_CHANGED, self._on_locale_changed, scope=self.scope)
        return self.load_source(self._value.locale)

    def did_update(self, locale: str | None = None) -> asyncio.Task | None:
        if locale is not None:
            self.requested_locale = locale
        if self.requested_locale and self.requested_locale != self._newest_locale():
            return self.load_source(self.requested_locale)
        return None

    def will_unmount(self) -> None:
        self._mounted = False
        hooks.off(hooks.LOCALE_CHANGED, self._on_locale_changed, scope=self.scope)

    def _on_locale_changed(self, locale: str, **kwargs) -> None:
        self.did_update(locale)

    # -- loading -------------------------------------------------------------

    def _newest_locale(self) -> str:
        """Locale the provider is heading to: newest live request, else the applied one."""
        if self.latest_request_wins:
            live = [s for s in self._in_flight if s > self._applied]
            if live:
                return self._in_flight[max(live)]
        return self._value.locale

    def load_source(self, locale: str) -> asyncio.Task | None:
        if not self.source:
            return None
        self._sequence += 1
        self._in_flight[self._sequence] = locale
        task = asyncio.get_running_loop().create_task(self._load(locale, self._sequence))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _load(self, locale: str, sequence: int) -> None:
        _log.debug("Loading locale source for %s (request %d)", locale, sequence)
        try:
            result = await self.source(locale)
            loaded = as_source(result)
        except Exception as e:
            error = SourceLoadError(locale)
            error.__cause__ = e
            self._notify(error)
            return
        finally:
            self._in_flight.pop(sequence, None)

        if not self._mounted:
            _log.debug("Dropping %s source resolved after unmount", locale)
            return
        if self.latest_request_wins and sequence < self._applied:
            _log.debug("Dropping superseded %s source (request %d)", locale, sequence)
            return

        self._applied = sequence
        self._value = dataclasses.replace(
            self._value, locale=locale, get=loaded.get, match=loaded.match
        )
        _log.info("Locale source applied: %s", locale)

    async def wait_pending(self) -> None:
        """Wait for every in-flight load to settle."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
