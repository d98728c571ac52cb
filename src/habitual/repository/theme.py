# SPDX-License-Identifier: MIT

import logging
from typing import Literal, cast

from habitual.error import PersistenceError, ValidationError
from habitual.repository.key_value import KeyValueStore

logger = logging.getLogger(__name__)

Theme = Literal["dark", "light"]

THEME_KEY = "theme"
THEMES: tuple[Theme, ...] = ("dark", "light")


class ThemeRepository:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def get_theme(self) -> Theme:
        try:
            stored = self._store.get_item(THEME_KEY)
        except PersistenceError as e:
            logger.warning("Theme is unreadable, using light: %s", e)
            return "light"
        if stored in THEMES:
            return cast(Theme, stored)
        return "light"

    def set_theme(self, theme: str) -> Theme:
        if theme not in THEMES:
            raise ValidationError(
                f"Unknown theme: {theme}. Valid options: {', '.join(THEMES)}"
            )
        self._store.set_item(THEME_KEY, theme)
        return cast(Theme, theme)

    def toggle_theme(self) -> Theme:
        return self.set_theme("light" if self.get_theme() == "dark" else "dark")
