from __future__ import annotations

import reflex as rx

from ..content import PORTFOLIO
from ..core.layout import section
from ..core.theme import tone
from .hero import profile_avatar


def _entry(heading: str, detail: str, period: str) -> rx.Component:
    return rx.vstack(
        rx.text(heading, weight="bold"),
        rx.text(detail, color=tone("text-muted")),
        rx.text(period, size="2", color="#6b7280"),
        spacing="1",
        align="start",
        margin_bottom="1.5rem",
    )


def _column(title: str, *entries: rx.Component) -> rx.Component:
    return rx.box(
        rx.heading(
            title,
            size="4",
            padding_bottom="0.5rem",
            margin_bottom="1rem",
            border_bottom="1px solid",
            border_color=tone("rule"),
        ),
        *entries,
    )


def resume() -> rx.Component:
    profile = PORTFOLIO.profile

    header = rx.flex(
        rx.center(profile_avatar(size="8"), width=rx.breakpoints(initial="100%", md="33%")),
        rx.vstack(
            rx.heading(profile.name, size="6"),
            rx.text(profile.title, color=tone("text-muted")),
            rx.hstack(
                rx.icon("map-pin", size=14),
                rx.text(profile.location, size="2"),
                spacing="1",
                align="center",
                color="#6b7280",
            ),
            spacing="2",
            align=rx.breakpoints(initial="center", md="start"),
        ),
        direction=rx.breakpoints(initial="column", md="row"),
        align="center",
        gap="1.5rem",
        margin_bottom="2rem",
    )

    return section(
        rx.box(
            header,
            rx.grid(
                _column(
                    "Education",
                    *[_entry(e.school, e.degree, e.period) for e in PORTFOLIO.education],
                ),
                _column(
                    "Experience",
                    *[_entry(e.role, e.organisation, e.period) for e in PORTFOLIO.experience],
                ),
                columns=rx.breakpoints(initial="1", md="2"),
                gap="2rem",
            ),
            rx.center(
                rx.link(
                    rx.button(
                        rx.icon("download"),
                        "Download Full Resume (PDF)",
                        size="3",
                    ),
                    href=PORTFOLIO.resume_url,
                ),
                margin_top="2rem",
            ),
            max_width="48rem",
            margin_x="auto",
            padding="2rem",
            border_radius="0.75rem",
            box_shadow="0 4px 6px -1px rgba(0, 0, 0, 0.1)",
            background=tone("surface"),
        ),
        section_id="resume",
        title="My Resume",
        shaded=True,
    )
