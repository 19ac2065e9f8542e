"""Persisted light/dark theme preference."""

from collections.abc import MutableMapping
from typing import Any

THEME_KEY = "theme"
DARK = "dark"
LIGHT = "light"


class ThemePreference:
    """Reads and writes the theme choice in a key-value store.

    In the page the store is NiceGUI's per-browser ``app.storage.user``.
    """

    def __init__(self, storage: MutableMapping[str, Any]) -> None:
        self._storage = storage

    @property
    def is_dark(self) -> bool | None:
        """Stored choice, or None to follow the system preference."""
        saved = self._storage.get(THEME_KEY)
        if saved == DARK:
            return True
        if saved == LIGHT:
            return False
        return None

    def set_dark(self, dark: bool) -> None:
        self._storage[THEME_KEY] = DARK if dark else LIGHT

    def toggle(self, system_dark: bool = False) -> bool:
        """Flip the theme and persist it.

        Args:
            system_dark: Effective value when nothing has been stored yet.

        Returns:
            True if the theme is now dark.
        """
        current = self.is_dark
        dark = not (system_dark if current is None else current)
        self.set_dark(dark)
        return dark
