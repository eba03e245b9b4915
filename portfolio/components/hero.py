from __future__ import annotations

import reflex as rx

from ..content import PORTFOLIO
from ..core.state import AppState
from ..core.theme import tone


def profile_avatar(size: str = "9") -> rx.Component:
    profile = PORTFOLIO.profile
    return rx.avatar(
        src=profile.photo,
        fallback=profile.initials,
        size=size,
        radius="full",
        class_name="profile-img-container",
        style={"background": "linear-gradient(to bottom right, #60a5fa, #a855f7)"},
    )


def hero() -> rx.Component:
    """Opening banner with name, headline and the two call-to-action links."""

    profile = PORTFOLIO.profile

    intro = rx.vstack(
        rx.heading(
            "Hi, I'm ",
            rx.text.span(profile.name, class_name="gradient-text"),
            size="9",
            weight="bold",
        ),
        rx.heading(
            profile.headline,
            size="7",
            color=tone("text-muted"),
        ),
        rx.text(
            profile.tagline,
            size="4",
            color=tone("text-muted"),
        ),
        rx.hstack(
            rx.button(
                "View My Work",
                size="3",
                on_click=AppState.navigate_to("projects"),
                class_name="cta",
            ),
            rx.button(
                "Contact Me",
                size="3",
                variant="outline",
                on_click=AppState.navigate_to("contact"),
                class_name="cta",
            ),
            spacing="4",
        ),
        spacing="5",
        align="start",
        class_name="hero-intro",
        width=rx.breakpoints(initial="100%", md="50%"),
    )

    return rx.box(
        rx.container(
            rx.flex(
                intro,
                rx.center(
                    profile_avatar(),
                    class_name="hero-portrait",
                    width=rx.breakpoints(initial="100%", md="50%"),
                ),
                direction=rx.breakpoints(initial="column", md="row"),
                align="center",
                gap="2rem",
            ),
            size="4",
        ),
        width="100%",
        padding_top=rx.breakpoints(initial="6rem", md="8rem"),
        padding_bottom=rx.breakpoints(initial="4rem", md="6rem"),
        padding_x="1rem",
    )
