"""Compact language switcher bound to the requested locale."""

import reflex as rx

from i18nprovider.config import settings
from i18nprovider.ui.state.locale_state import LocaleState


def language_switcher() -> rx.Component:
    return rx.select(
        settings.supported_locales,
        value=LocaleState.locale,
        on_change=LocaleState.set_locale,
        size="1",
        width="100%",
    )
