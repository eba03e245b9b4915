from __future__ import annotations

import reflex as rx

from ...content import PORTFOLIO, SocialLink


def _social_link(link: SocialLink) -> rx.Component:
    return rx.link(
        rx.icon(link.icon, size=22),
        href=link.href,
        is_external=link.href.startswith("http"),
        aria_label=link.label,
        class_name="footer-link",
        color="#9ca3af",
    )


def app_footer() -> rx.Component:
    profile = PORTFOLIO.profile

    return rx.box(
        rx.container(
            rx.flex(
                rx.vstack(
                    rx.text(profile.name, class_name="gradient-text", size="5", weight="bold"),
                    rx.text(profile.footer_tagline, color="#9ca3af"),
                    spacing="1",
                    align=rx.breakpoints(initial="center", md="start"),
                ),
                rx.hstack(
                    *[_social_link(link) for link in PORTFOLIO.social_links],
                    spacing="5",
                ),
                direction=rx.breakpoints(initial="column", md="row"),
                justify="between",
                align="center",
                gap="1rem",
                width="100%",
            ),
            rx.box(
                rx.text(
                    f"© {profile.copyright_year} {profile.name}. All rights reserved.",
                    size="2",
                    color="#9ca3af",
                ),
                border_top="1px solid #1f2937",
                margin_top="2rem",
                padding_top="2rem",
                text_align="center",
            ),
            size="4",
        ),
        width="100%",
        background="#111827",
        color="#ffffff",
        padding_y="2rem",
        padding_x="1rem",
    )
