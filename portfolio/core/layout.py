from __future__ import annotations

import reflex as rx

from .components.footer import app_footer
from .components.header import app_header
from .theme import tone


def section(
    *children: rx.Component,
    section_id: str | None = None,
    title: str | None = None,
    shaded: bool = False,
) -> rx.Component:
    """Full-width page section with the shared heading and width limit."""

    heading = []
    if title:
        heading.append(
            rx.heading(
                title,
                size="8",
                class_name="gradient-text",
                text_align="center",
                width="100%",
                margin_bottom="3rem",
            )
        )

    background = tone("surface-shaded") if shaded else tone("surface")

    return rx.box(
        rx.container(
            *heading,
            *children,
            size="4",
        ),
        id=section_id,
        width="100%",
        padding_y="4rem",
        padding_x="1rem",
        background=background,
    )


def app_shell(*children: rx.Component) -> rx.Component:
    """Wrap pages in the common application shell."""

    return rx.box(
        app_header(),
        rx.box(
            *children,
            width="100%",
        ),
        app_footer(),
        width="100%",
        min_height="100vh",
        class_name="portfolio",
        background=tone("page-bg"),
        color=tone("page-text"),
        transition="background-color 0.3s ease, color 0.3s ease",
    )
