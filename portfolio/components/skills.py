from __future__ import annotations

import reflex as rx

from ..content import PORTFOLIO, SkillGroup
from ..core.layout import section
from ..core.theme import tone

STAGGER_SECONDS = 0.1


def _skill_card(group: SkillGroup, index: int) -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.icon(group.icon, color=rx.color(group.color_scheme, 9)),
            rx.heading(group.name, size="4"),
            spacing="2",
            align="center",
            margin_bottom="1rem",
        ),
        rx.flex(
            *[
                rx.badge(
                    skill,
                    color_scheme=group.color_scheme,
                    radius="full",
                    size="2",
                    class_name="skill-badge",
                )
                for skill in group.skills
            ],
            wrap="wrap",
            gap="0.5rem",
        ),
        class_name="skill-card",
        style={"animation_delay": f"{index * STAGGER_SECONDS:.1f}s"},
        padding="1.5rem",
        border_radius="0.75rem",
        box_shadow="0 1px 2px rgba(0, 0, 0, 0.05)",
        background=tone("surface"),
    )


def skills() -> rx.Component:
    return section(
        rx.grid(
            *[_skill_card(group, index) for index, group in enumerate(PORTFOLIO.skill_groups)],
            columns=rx.breakpoints(initial="2", md="3", lg="4"),
            gap="1.5rem",
            width="100%",
        ),
        section_id="skills",
        title="My Skills",
        shaded=True,
    )
