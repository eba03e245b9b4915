from __future__ import annotations

import reflex as rx

from ...content import PORTFOLIO
from ..navigation import NAV_LINKS, NavLink
from ..state import AppState
from ..theme import tone


def _theme_button() -> rx.Component:
    # Both icons render; the ``dark`` root class picks one before hydration.
    return rx.icon_button(
        rx.icon("sun", class_name="theme-icon-sun"),
        rx.icon("moon", class_name="theme-icon-moon"),
        aria_label="Toggle theme",
        on_click=AppState.toggle_theme,
        variant="ghost",
        radius="full",
        size="3",
        color=tone("nav-text"),
    )


def _nav_link(link: NavLink, *, block: bool = False) -> rx.Component:
    return rx.link(
        link.label,
        href=link.href,
        on_click=AppState.navigate_to(link.section_id).prevent_default,
        class_name="nav-link" if not block else "nav-link-block",
        display="block" if block else "inline-block",
        padding_x="0.75rem",
        padding_y="0.5rem",
        color=tone("nav-text"),
        underline="none",
    )


def _mobile_drawer() -> rx.Component:
    return rx.cond(
        AppState.menu_open,
        rx.box(
            rx.vstack(
                *[_nav_link(link, block=True) for link in NAV_LINKS],
                spacing="1",
                width="100%",
                align="stretch",
            ),
            display=["block", "block", "none"],
            padding="0.5rem",
            box_shadow="0 10px 15px -3px rgba(0, 0, 0, 0.1)",
            background=tone("surface"),
        ),
    )


def app_header() -> rx.Component:
    """Render the fixed navigation bar."""

    return rx.box(
        rx.container(
            rx.hstack(
                rx.text(
                    PORTFOLIO.profile.name,
                    class_name="gradient-text",
                    size="5",
                    weight="bold",
                ),
                rx.spacer(),
                rx.hstack(
                    *[_nav_link(link) for link in NAV_LINKS],
                    _theme_button(),
                    spacing="5",
                    align="center",
                    display=["none", "none", "flex"],
                ),
                rx.hstack(
                    _theme_button(),
                    rx.icon_button(
                        rx.icon("menu"),
                        id="menu-toggle",
                        aria_label="Open navigation",
                        on_click=AppState.toggle_menu,
                        variant="ghost",
                        color=tone("nav-text"),
                    ),
                    spacing="3",
                    align="center",
                    display=["flex", "flex", "none"],
                ),
                align="center",
                height="4rem",
                width="100%",
            ),
            size="4",
            padding_x="1rem",
        ),
        _mobile_drawer(),
        class_name="site-header",
        width="100%",
        position="fixed",
        top="0",
        z_index="20",
        backdrop_filter="blur(4px)",
        background=tone("nav-bg"),
    )
