"""The per-category selections the user is about to apply."""

from __future__ import annotations

from dataclasses import dataclass, fields

from labwcchanger.core.scanner import Category

_SLOTS: dict[Category, str] = {
    Category.WINDOW_MANAGER_THEME: "wm_theme",
    Category.GTK_THEME: "gtk_theme",
    Category.ICON_THEME: "icon_theme",
    Category.TERMINAL_SCHEME: "terminal_scheme",
    Category.WALLPAPER: "wallpaper",
}


@dataclass
class SelectionBundle:
    """One chosen asset name per category; "" means unset."""

    wm_theme: str = ""
    gtk_theme: str = ""
    icon_theme: str = ""
    terminal_scheme: str = ""
    wallpaper: str = ""

    def get(self, category: Category) -> str:
        return getattr(self, _SLOTS[category])

    def set(self, category: Category, value: str) -> None:
        setattr(self, _SLOTS[category], value)

    def merge(self, other: SelectionBundle) -> list[Category]:
        """Copy non-empty slots from ``other``; return the categories that changed."""
        changed: list[Category] = []
        for category in Category:
            value = other.get(category)
            if value and value != self.get(category):
                self.set(category, value)
                changed.append(category)
        return changed

    def fill_empty(self, other: SelectionBundle) -> list[Category]:
        """Copy values from ``other`` into slots that are still unset."""
        filled: list[Category] = []
        for category in Category:
            value = other.get(category)
            if value and not self.get(category):
                self.set(category, value)
                filled.append(category)
        return filled

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))

    def items(self) -> list[tuple[Category, str]]:
        return [(category, self.get(category)) for category in Category]
