"""Light/dark theme preference and its persistence."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Callable, Dict, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)

THEME_STORAGE_KEY = "theme"
DARK_CLASS = "dark"


class StorageUnavailable(RuntimeError):
    """Raised by a preference store that cannot be read or written."""


class ThemePreference(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ThemePreference":
        """Return the stored preference, falling back to light."""

        if value == cls.DARK.value:
            return cls.DARK
        return cls.LIGHT

    def toggled(self) -> "ThemePreference":
        return ThemePreference.LIGHT if self is ThemePreference.DARK else ThemePreference.DARK


class PreferenceStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class ThemeController:
    """Owns the current preference.

    ``load`` must run before anything is rendered: it reads the stored value
    and only then hands it to ``apply``. ``toggle`` applies the new value and
    writes it through to the store. A store that raises is treated as absent.
    """

    def __init__(
        self,
        store: Optional[PreferenceStore],
        apply: Optional[Callable[[ThemePreference], None]] = None,
    ) -> None:
        self._store = store
        self._apply = apply
        self._preference = ThemePreference.LIGHT

    @property
    def preference(self) -> ThemePreference:
        return self._preference

    def load(self) -> ThemePreference:
        self._preference = ThemePreference.parse(self._read())
        self._notify()
        return self._preference

    def toggle(self) -> ThemePreference:
        self._preference = self._preference.toggled()
        self._notify()
        self._write(self._preference)
        return self._preference

    def _read(self) -> Optional[str]:
        if self._store is None:
            return None
        try:
            return self._store.get(THEME_STORAGE_KEY)
        except (StorageUnavailable, OSError) as exc:
            logger.debug("Theme preference could not be read: %s", exc)
            return None

    def _write(self, preference: ThemePreference) -> None:
        if self._store is None:
            return
        try:
            self._store.set(THEME_STORAGE_KEY, preference.value)
        except (StorageUnavailable, OSError) as exc:
            logger.debug("Theme preference will not survive a reload: %s", exc)

    def _notify(self) -> None:
        if self._apply is not None:
            self._apply(self._preference)


def apply_theme_script(preference: ThemePreference) -> str:
    """Client code toggling the root-level marker class."""

    enabled = "true" if preference is ThemePreference.DARK else "false"
    return (
        f"document.documentElement.classList.toggle({json.dumps(DARK_CLASS)}, {enabled});"
    )


def theme_bootstrap_script() -> str:
    """Head script applying the stored theme before the first paint."""

    return (
        "(function () {"
        "var theme = 'light';"
        f"try {{ theme = window.localStorage.getItem({json.dumps(THEME_STORAGE_KEY)}) || 'light'; }}"
        " catch (e) {}"
        f"if (theme === 'dark') {{ document.documentElement.classList.add({json.dumps(DARK_CLASS)}); }}"
        "})();"
    )


# Colour tokens as (light, dark). Components reference them through ``tone``
# so the colours follow the ``dark`` class the bootstrap script sets.
THEME_TOKENS: Dict[str, Tuple[str, str]] = {
    "page-bg": ("#f9fafb", "#111827"),
    "page-text": ("#1f2937", "#e5e7eb"),
    "surface": ("#ffffff", "#1f2937"),
    "surface-shaded": ("#f9fafb", "#111827"),
    "card": ("#ffffff", "#374151"),
    "card-border": ("#f3f4f6", "#4b5563"),
    "rule": ("#e5e7eb", "#374151"),
    "text-muted": ("#4b5563", "#9ca3af"),
    "text-link": ("#1f2937", "#d1d5db"),
    "nav-text": ("#374151", "#d1d5db"),
    "nav-bg": ("rgba(255, 255, 255, 0.8)", "rgba(31, 41, 55, 0.8)"),
}


def tone(token: str) -> str:
    """CSS reference to a theme colour token."""

    if token not in THEME_TOKENS:
        raise KeyError(f"Unknown theme token: {token!r}")
    return f"var(--{token})"


def theme_stylesheet() -> str:
    """Custom properties for both themes, keyed off the root marker class."""

    light = "".join(f"--{name}: {pair[0]};" for name, pair in THEME_TOKENS.items())
    dark = "".join(f"--{name}: {pair[1]};" for name, pair in THEME_TOKENS.items())
    return f":root {{{light}}} html.{DARK_CLASS} {{{dark}}}"
