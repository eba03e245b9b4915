from __future__ import annotations

import reflex as rx

from ..content import PORTFOLIO, Project, tag_color_scheme
from ..core.layout import section
from ..core.theme import tone


def _project_card(project: Project) -> rx.Component:
    """Render a single project card."""

    return rx.box(
        rx.center(
            rx.icon(project.icon, size=64, color="white"),
            height="12rem",
            background=project.background,
        ),
        rx.vstack(
            rx.heading(project.title, size="5"),
            rx.text(project.description, color=tone("text-muted")),
            rx.flex(
                *[
                    rx.badge(tag, color_scheme=tag_color_scheme(tag), radius="full")
                    for tag in project.tags
                ],
                wrap="wrap",
                gap="0.5rem",
            ),
            rx.hstack(
                rx.link("Live Demo", href=project.live_link, weight="medium"),
                rx.link(
                    "Source Code",
                    href=project.source_link,
                    weight="medium",
                    color=tone("text-muted"),
                ),
                spacing="3",
            ),
            spacing="3",
            align="start",
            padding="1.5rem",
        ),
        class_name="project-card",
        border_radius="0.75rem",
        overflow="hidden",
        box_shadow="0 4px 6px -1px rgba(0, 0, 0, 0.1)",
        border="1px solid",
        border_color=tone("card-border"),
        background=tone("card"),
    )


def projects() -> rx.Component:
    return section(
        rx.grid(
            *[_project_card(project) for project in PORTFOLIO.projects],
            columns=rx.breakpoints(initial="1", md="2", lg="3"),
            gap="2rem",
            width="100%",
        ),
        rx.center(
            rx.link(
                rx.button("View All Projects", size="3", variant="outline", class_name="cta"),
                href=PORTFOLIO.all_projects_url,
            ),
            margin_top="3rem",
        ),
        section_id="projects",
        title="My Projects",
    )
