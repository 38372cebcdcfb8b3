"""Locale state — the client's requested locale, sent to that client's providers."""

import reflex as rx

from i18nprovider import hooks
from i18nprovider.config import settings


class LocaleState(rx.State):
    locale: str = settings.default_locale

    def set_locale(self, locale: str):
        if locale not in settings.supported_locales:
            return
        self.locale = locale
        hooks.emit(
            hooks.LOCALE_CHANGED,
            scope=self.router.session.client_token,
            locale=locale,
        )
