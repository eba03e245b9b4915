from __future__ import annotations

import json
from typing import NamedTuple, Tuple

HEADER_OFFSET = 80
SCROLLED_THRESHOLD = 10
SCROLLED_CLASS = "scrolled"


class NavLink(NamedTuple):
    label: str
    section_id: str

    @property
    def href(self) -> str:
        return f"#{self.section_id}"


NAV_LINKS: Tuple[NavLink, ...] = (
    NavLink("About", "about"),
    NavLink("Skills", "skills"),
    NavLink("Projects", "projects"),
    NavLink("Resume", "resume"),
    NavLink("Contact", "contact"),
)


def scroll_script(section_id: str, header_offset: float = HEADER_OFFSET) -> str:
    """Smooth-scroll client code placing a section just below the fixed header.

    A missing section is a no-op.
    """

    return (
        f"(function () {{ var el = document.getElementById({json.dumps(section_id)});"
        " if (!el) { return; }"
        f" window.scrollTo({{top: Math.max(0, el.offsetTop - {header_offset:g}), behavior: 'smooth'}});"
        " })();"
    )


def scroll_shadow_script(threshold: int = SCROLLED_THRESHOLD) -> str:
    """Head script marking the root once the page has scrolled past ``threshold``."""

    return (
        "(function () {"
        " function update() {"
        f" document.documentElement.classList.toggle({json.dumps(SCROLLED_CLASS)},"
        f" window.scrollY > {threshold}); }}"
        " window.addEventListener('scroll', update, {passive: true});"
        " update();"
        " })();"
    )
