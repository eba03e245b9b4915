from __future__ import annotations

import logging
from typing import Any, Optional

import reflex as rx

from .navigation import scroll_script
from .reveal import RevealTracker
from .theme import (
    THEME_STORAGE_KEY,
    ThemeController,
    ThemePreference,
    apply_theme_script,
)

logger = logging.getLogger(__name__)


class _ClientStorage:
    """Browser local-storage var exposed as a preference store."""

    def __init__(self, state: "AppState") -> None:
        self._state = state

    def get(self, key: str) -> Optional[str]:
        return self._state.stored_theme or None

    def set(self, key: str, value: str) -> None:
        self._state.stored_theme = value


class AppState(rx.State):
    """Application-wide state: theme preference and the mobile drawer."""

    stored_theme: str = rx.LocalStorage(
        ThemePreference.LIGHT.value, name=THEME_STORAGE_KEY, sync=True
    )
    dark_mode: bool = False
    menu_open: bool = False

    def _theme_controller(self) -> ThemeController:
        return ThemeController(_ClientStorage(self), apply=self._apply_preference)

    def _apply_preference(self, preference: ThemePreference) -> None:
        self.dark_mode = preference is ThemePreference.DARK

    @rx.event
    def hydrate_theme(self):
        """Read the stored preference and apply it to the document."""

        controller = self._theme_controller()
        preference = controller.load()
        return rx.call_script(apply_theme_script(preference))

    @rx.event
    def toggle_theme(self):
        """Toggle between light and dark color schemes."""

        controller = self._theme_controller()
        controller.load()
        preference = controller.toggle()
        logger.debug("Theme switched to %s", preference.value)
        return rx.call_script(apply_theme_script(preference))

    @rx.event
    def toggle_menu(self) -> None:
        self.menu_open = not self.menu_open

    @rx.event
    def close_menu(self) -> None:
        self.menu_open = False

    @rx.event
    def navigate_to(self, section_id: str):
        self.menu_open = False
        return rx.call_script(scroll_script(section_id))


class RevealState(rx.State):
    """Blocks whose reveal transition has already fired."""

    revealed: list[str] = []

    @rx.event
    def mark_visible(self, entry: dict[str, Any]) -> None:
        if not isinstance(entry, dict):
            return
        block_id = str(entry.get("id") or "")
        try:
            ratio = float(entry.get("ratio", 0.0))
        except (TypeError, ValueError):
            return
        if not block_id:
            return
        tracker = RevealTracker(visible=self.revealed)
        tracker.observe(block_id)
        if tracker.notify(block_id, min(max(ratio, 0.0), 1.0)):
            self.revealed = tracker.visible_blocks

    @rx.event
    def forget_block(self, block_id: str) -> None:
        tracker = RevealTracker(visible=self.revealed)
        tracker.forget(block_id)
        self.revealed = tracker.visible_blocks
