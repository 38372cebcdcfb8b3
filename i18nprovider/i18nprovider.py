"""Demo app: a page with the language switcher."""

import reflex as rx

from i18nprovider.ui.components.language_switcher import language_switcher
from i18nprovider.ui.state.locale_state import LocaleState


def index() -> rx.Component:
    return rx.center(
        rx.vstack(
            rx.heading("i18nprovider", size="5"),
            rx.text("Requested locale: ", LocaleState.locale, size="2"),
            language_switcher(),
            spacing="3",
            width="240px",
        ),
        padding="32px",
    )


app = rx.App()
app.add_page(index, route="/", title="i18nprovider")
