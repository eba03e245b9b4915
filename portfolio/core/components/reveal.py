from __future__ import annotations

import reflex as rx

from ..reveal import REVEAL_OFFSET_PX, REVEAL_TRANSITION, observer_script
from ..state import RevealState


def reveal_on_view(child: rx.Component, block_id: str) -> rx.Component:
    """Slide ``child`` up into view the first time it is scrolled to."""

    element_id = f"reveal-{block_id}"
    visible = RevealState.revealed.contains(element_id)

    return rx.box(
        child,
        id=element_id,
        width="100%",
        opacity=rx.cond(visible, "1", "0"),
        transform=rx.cond(visible, "translateY(0)", f"translateY({REVEAL_OFFSET_PX}px)"),
        transition=REVEAL_TRANSITION,
        on_mount=rx.call_script(
            observer_script(element_id),
            callback=RevealState.mark_visible,
        ),
        on_unmount=RevealState.forget_block(element_id),
    )
