from __future__ import annotations

import reflex as rx

from ..content import PORTFOLIO
from ..core.layout import section
from ..core.theme import tone


def _timeline_entry(*children: rx.Component, accent: str) -> rx.Component:
    return rx.box(
        *children,
        border_left=f"4px solid {accent}",
        padding_left="1rem",
    )


def about() -> rx.Component:
    muted = tone("text-muted")

    who = rx.vstack(
        rx.heading("Who I Am", size="6"),
        *[rx.text(paragraph, color=muted) for paragraph in PORTFOLIO.profile.bio],
        spacing="4",
        align="start",
        width=rx.breakpoints(initial="100%", md="50%"),
    )

    education = rx.vstack(
        rx.heading("Education", size="6"),
        *[
            _timeline_entry(
                rx.heading(entry.school, size="4"),
                rx.text(entry.degree, color=muted),
                rx.text(entry.summary, size="2", color="#6b7280"),
                accent="#3b82f6",
            )
            for entry in PORTFOLIO.education
        ],
        _timeline_entry(
            rx.heading("Relevant Coursework", size="4"),
            rx.text(", ".join(PORTFOLIO.coursework), color=muted),
            accent="#a855f7",
        ),
        spacing="5",
        align="start",
        width=rx.breakpoints(initial="100%", md="50%"),
    )

    return section(
        rx.flex(
            who,
            education,
            direction=rx.breakpoints(initial="column", md="row"),
            gap="2rem",
        ),
        section_id="about",
        title="About Me",
    )
