"""Discover installed theme assets across multiple search roots."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterable

from labwcchanger import runtime_paths
from labwcchanger.errors import SchemeNotFoundError

if TYPE_CHECKING:
    from labwcchanger.config.settings import AppSettings

SCHEME_EXTENSION = ".conf"
WALLPAPER_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}

# Always offered: use the active GTK theme's window decorations.
GTK_WM_THEME = "GTK"


class Category(Enum):
    """The five independently scanned and matched asset kinds."""

    WINDOW_MANAGER_THEME = "LabWC"
    GTK_THEME = "GTK"
    ICON_THEME = "Icons"
    TERMINAL_SCHEME = "Kitty"
    WALLPAPER = "Walls"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class SearchRoots:
    """Per-category search roots handed to the scanner."""

    theme_dirs: list[Path] = field(default_factory=runtime_paths.theme_dirs)
    icon_dirs: list[Path] = field(default_factory=runtime_paths.icon_dirs)
    kitty_themes_dir: Path = field(default_factory=runtime_paths.kitty_themes_dir)
    wallpaper_dir: Path = field(default_factory=runtime_paths.wallpaper_dir)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> SearchRoots:
        return cls(
            theme_dirs=runtime_paths.theme_dirs() + [Path(p) for p in settings.extra_theme_dirs],
            icon_dirs=runtime_paths.icon_dirs() + [Path(p) for p in settings.extra_icon_dirs],
            kitty_themes_dir=Path(settings.kitty_themes_dir),
            wallpaper_dir=Path(settings.wallpaper_dir),
        )

    def roots_for(self, category: Category) -> list[Path]:
        if category in (Category.WINDOW_MANAGER_THEME, Category.GTK_THEME):
            return list(self.theme_dirs)
        if category is Category.ICON_THEME:
            return list(self.icon_dirs)
        if category is Category.TERMINAL_SCHEME:
            return [self.kitty_themes_dir]
        return [self.wallpaper_dir]


def entry_is_dir(entry: os.DirEntry) -> bool:
    """True for real directories and for symlinks that resolve to a directory.

    Package-manager profiles (e.g. /run/current-system/sw) expose themes as
    symlinked entries, so the link target has to be stat'ed.
    """
    try:
        if entry.is_dir(follow_symlinks=False):
            return True
        if not entry.is_symlink():
            return False
        return Path(entry.path).is_dir()
    except OSError:
        return False


def _entry_is_file(entry: os.DirEntry) -> bool:
    try:
        return not entry.is_dir()
    except OSError:
        return False


# Membership tests: (entry) -> AssetName or None

def _wm_theme_name(entry: os.DirEntry) -> str | None:
    if not entry_is_dir(entry):
        return None
    if (Path(entry.path) / "openbox-3" / "themerc").exists():
        return entry.name
    return None


def _gtk_theme_name(entry: os.DirEntry) -> str | None:
    if not entry_is_dir(entry):
        return None
    base = Path(entry.path)
    if (
        (base / "gtk-3.0" / "gtk.css").exists()
        or (base / "gtk-4.0" / "gtk.css").exists()
        or (base / "gtk-3.0").exists()
    ):
        return entry.name
    return None


def _icon_theme_name(entry: os.DirEntry) -> str | None:
    if entry.name.startswith(".") or not entry_is_dir(entry):
        return None
    if (Path(entry.path) / "index.theme").exists():
        return entry.name
    return None


def _scheme_name(entry: os.DirEntry) -> str | None:
    if not _entry_is_file(entry):
        return None
    path = Path(entry.name)
    if path.suffix.lower() != SCHEME_EXTENSION:
        return None
    stem = entry.name[: -len(path.suffix)].strip()
    return stem or None


def _wallpaper_name(entry: os.DirEntry) -> str | None:
    if not _entry_is_file(entry):
        return None
    if Path(entry.name).suffix.lower() in WALLPAPER_EXTENSIONS:
        return entry.name
    return None


MEMBERSHIP: dict[Category, Callable[[os.DirEntry], str | None]] = {
    Category.WINDOW_MANAGER_THEME: _wm_theme_name,
    Category.GTK_THEME: _gtk_theme_name,
    Category.ICON_THEME: _icon_theme_name,
    Category.TERMINAL_SCHEME: _scheme_name,
    Category.WALLPAPER: _wallpaper_name,
}


def scan_category(category: Category, roots: Iterable[str | Path]) -> list[str]:
    """Return the sorted, deduplicated asset names of a category across roots.

    Missing or unreadable roots are skipped.
    """
    member_name = MEMBERSHIP[category]
    found: set[str] = set()
    if category is Category.WINDOW_MANAGER_THEME:
        found.add(GTK_WM_THEME)

    for root in roots:
        try:
            with os.scandir(root) as entries:
                for entry in entries:
                    name = member_name(entry)
                    if name:
                        found.add(name)
        except OSError:
            continue
    return sorted(found)


def scan_wm_themes(roots: Iterable[str | Path] | None = None) -> list[str]:
    return scan_category(
        Category.WINDOW_MANAGER_THEME,
        runtime_paths.theme_dirs() if roots is None else roots,
    )


def scan_gtk_themes(roots: Iterable[str | Path] | None = None) -> list[str]:
    return scan_category(
        Category.GTK_THEME,
        runtime_paths.theme_dirs() if roots is None else roots,
    )


def scan_icon_themes(roots: Iterable[str | Path] | None = None) -> list[str]:
    return scan_category(
        Category.ICON_THEME,
        runtime_paths.icon_dirs() if roots is None else roots,
    )


def scan_terminal_schemes(schemes_dir: str | Path | None = None) -> list[str]:
    directory = runtime_paths.kitty_themes_dir() if schemes_dir is None else schemes_dir
    return scan_category(Category.TERMINAL_SCHEME, [directory])


def scan_wallpapers(wallpaper_dir: str | Path | None = None) -> list[str]:
    directory = runtime_paths.wallpaper_dir() if wallpaper_dir is None else wallpaper_dir
    return scan_category(Category.WALLPAPER, [directory])


def scan_all(roots: SearchRoots) -> dict[Category, list[str]]:
    """Scan every category with its own roots."""
    return {category: scan_category(category, roots.roots_for(category)) for category in Category}


def resolve_scheme_file(name: str, schemes_dir: str | Path | None = None) -> Path:
    """Locate the kitty scheme file for ``name``.

    Raises:
        SchemeNotFoundError: neither the scan nor ``<dir>/<name>.conf`` finds it.
    """
    directory = Path(runtime_paths.kitty_themes_dir() if schemes_dir is None else schemes_dir)
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if _scheme_name(entry) is None:
                    continue
                if entry.name[: -len(SCHEME_EXTENSION)] == name:
                    return Path(entry.path)
    except OSError:
        # unreadable directory: still try the direct path
        pass

    fallback = directory / f"{name}{SCHEME_EXTENSION}"
    if fallback.is_file():
        return fallback
    raise SchemeNotFoundError(scheme=name, path=fallback)
