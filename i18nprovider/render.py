"""Default renderer turning a component subtree into a string."""

from typing import Any

import reflex as rx


def render_component(component: Any) -> str:
    if component is None:
        return ""
    if isinstance(component, str):
        return component
    if isinstance(component, rx.Component):
        return str(component)
    if isinstance(component, (list, tuple)):
        return "".join(render_component(child) for child in component)
    if callable(component):
        return render_component(component())
    raise TypeError(f"Cannot render {type(component).__name__} to a string")
