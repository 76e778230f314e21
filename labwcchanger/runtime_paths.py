"""Search roots and config file locations for theme assets."""

from __future__ import annotations

import os
from pathlib import Path


def home_dir() -> Path:
    """Return the user's home directory."""
    try:
        return Path.home()
    except RuntimeError:
        return Path(os.environ.get("HOME", "/"))


def _share_dirs(kind: str) -> list[Path]:
    home = home_dir()
    return [
        Path("/usr/share") / kind,
        home / ".local" / "share" / kind,
        Path("/run/current-system/sw/share") / kind,
        home / ".nix-profile" / "share" / kind,
    ]


def theme_dirs() -> list[Path]:
    """Roots searched for GTK and window-manager themes."""
    return _share_dirs("themes")


def icon_dirs() -> list[Path]:
    """Roots searched for icon themes."""
    return _share_dirs("icons")


def kitty_themes_dir() -> Path:
    return home_dir() / ".config" / "kitty" / "themes"


def wallpaper_dir() -> Path:
    return home_dir() / "Pictures" / "walls"


def labwc_rc_path() -> Path:
    return home_dir() / ".config" / "labwc" / "rc.xml"


def labwc_env_path() -> Path:
    return home_dir() / ".config" / "labwc" / "environment"


def fuzzel_ini_path() -> Path:
    return home_dir() / ".config" / "fuzzel" / "fuzzel.ini"


def package_root() -> Path:
    """Return the directory holding the `labwcchanger` package."""
    return Path(__file__).resolve().parent


def builtin_styles_path() -> Path:
    """Resolve the bundled style keyword table."""
    return package_root() / "core" / "styles.yaml"
