"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from labwcchanger import runtime_paths


class AppSettings:
    """Wraps QSettings for persistent app configuration."""

    def __init__(self) -> None:
        self._qs = QSettings("LabwcChanger", "LabwcChanger")

    # -- asset locations --

    @property
    def wallpaper_dir(self) -> str:
        raw = self._qs.value("dirs/wallpapers", "", type=str)
        return (raw or "").strip() or str(runtime_paths.wallpaper_dir())

    @wallpaper_dir.setter
    def wallpaper_dir(self, value: str) -> None:
        self._qs.setValue("dirs/wallpapers", (value or "").strip())

    @property
    def kitty_themes_dir(self) -> str:
        raw = self._qs.value("dirs/kitty_themes", "", type=str)
        return (raw or "").strip() or str(runtime_paths.kitty_themes_dir())

    @kitty_themes_dir.setter
    def kitty_themes_dir(self, value: str) -> None:
        self._qs.setValue("dirs/kitty_themes", (value or "").strip())

    @property
    def extra_theme_dirs(self) -> list[str]:
        return self._string_list("dirs/extra_themes")

    @extra_theme_dirs.setter
    def extra_theme_dirs(self, value: list[str]) -> None:
        self._qs.setValue("dirs/extra_themes", [p for p in value if isinstance(p, str) and p.strip()])

    @property
    def extra_icon_dirs(self) -> list[str]:
        return self._string_list("dirs/extra_icons")

    @extra_icon_dirs.setter
    def extra_icon_dirs(self, value: list[str]) -> None:
        self._qs.setValue("dirs/extra_icons", [p for p in value if isinstance(p, str) and p.strip()])

    # -- style --

    @property
    def last_style(self) -> str:
        return (self._qs.value("ui/last_style", "", type=str) or "").strip()

    @last_style.setter
    def last_style(self, value: str) -> None:
        self._qs.setValue("ui/last_style", (value or "").strip())

    # -- window geometry --

    @property
    def window_geometry(self) -> bytes | None:
        return self._qs.value("ui/window_geometry")

    @window_geometry.setter
    def window_geometry(self, value: bytes) -> None:
        self._qs.setValue("ui/window_geometry", value)

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def user_styles_path(self) -> Path:
        return self.app_data_dir / "styles.yaml"

    def _string_list(self, key: str) -> list[str]:
        raw = self._qs.value(key, [])
        if raw is None:
            return []
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, (list, tuple)):
            return []
        return [item.strip() for item in raw if isinstance(item, str) and item.strip()]

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
        return base / "labwcchanger"
