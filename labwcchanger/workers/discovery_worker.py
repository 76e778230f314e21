"""Worker that gathers installed assets, available styles and current settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from labwcchanger.core.current import CurrentSettings, load_current_settings
from labwcchanger.core.scanner import Category, SearchRoots, scan_category
from labwcchanger.core.styles import StyleTable, available_styles
from labwcchanger.workers.base_worker import BaseWorker


@dataclass
class DiscoveryResult:
    """Everything the front end needs after one discovery pass."""

    assets: dict[Category, list[str]] = field(default_factory=dict)
    styles: list[str] = field(default_factory=list)
    current: CurrentSettings = field(default_factory=CurrentSettings)

    def names(self, category: Category) -> list[str]:
        return self.assets.get(category, [])


class DiscoveryWorker(BaseWorker):
    """Scans every category and probes the active settings in one background unit."""

    def __init__(
        self,
        roots: SearchRoots,
        table: StyleTable,
        probe: Callable[[], CurrentSettings] = load_current_settings,
    ) -> None:
        super().__init__()
        self._roots = roots
        self._table = table
        self._probe = probe

    def _execute(self) -> DiscoveryResult | None:
        categories = list(Category)
        total = len(categories) + 2
        result = DiscoveryResult()

        for step, category in enumerate(categories, start=1):
            if self._is_cancelled:
                return None
            self.progress.emit(step, total, f"Scanning {category.label}")
            result.assets[category] = scan_category(category, self._roots.roots_for(category))

        if self._is_cancelled:
            return None
        self.progress.emit(total - 1, total, "Detecting styles")
        result.styles = available_styles(
            result.names(Category.GTK_THEME),
            result.names(Category.WALLPAPER),
            self._table,
        )

        if self._is_cancelled:
            return None
        self.progress.emit(total, total, "Reading current settings")
        result.current = self._probe()
        return result
