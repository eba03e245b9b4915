from __future__ import annotations

import reflex as rx

from ..components import about, contact, hero, projects, resume, skills
from ..core.components.reveal import reveal_on_view
from ..core.layout import app_shell


def index() -> rx.Component:
    """The single portfolio page."""

    return app_shell(
        hero(),
        reveal_on_view(about(), "about"),
        reveal_on_view(skills(), "skills"),
        reveal_on_view(projects(), "projects"),
        reveal_on_view(resume(), "resume"),
        reveal_on_view(contact(), "contact"),
    )
