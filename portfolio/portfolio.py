from __future__ import annotations

import reflex as rx

from .content import PORTFOLIO
from .core.navigation import scroll_shadow_script
from .core.state import AppState
from .core.theme import theme_bootstrap_script, theme_stylesheet
from .pages.index import index


def _create_app() -> rx.App:
    """Instantiate the Reflex app with the theme applied before first paint."""

    return rx.App(
        theme=rx.theme(accent_color="blue", has_background=False),
        stylesheets=["/portfolio.css"],
        head_components=[
            rx.el.style(theme_stylesheet()),
            rx.script(theme_bootstrap_script()),
            rx.script(scroll_shadow_script()),
        ],
    )


app = _create_app()

app.add_page(
    index,
    route="/",
    title=f"{PORTFOLIO.profile.name} | Portfolio",
    description=PORTFOLIO.profile.headline,
    on_load=AppState.hydrate_theme,
)
