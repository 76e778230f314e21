"""Shared fixtures for theme asset trees."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


def make_gtk_theme(root: Path, name: str, *, gtk4: bool = False, openbox: bool = False) -> Path:
    theme = root / name
    if gtk4:
        (theme / "gtk-4.0").mkdir(parents=True)
        (theme / "gtk-4.0" / "gtk.css").write_text("/* gtk4 */", encoding="utf-8")
    else:
        (theme / "gtk-3.0").mkdir(parents=True)
        (theme / "gtk-3.0" / "gtk.css").write_text("/* gtk3 */", encoding="utf-8")
    if openbox:
        (theme / "openbox-3").mkdir(parents=True)
        (theme / "openbox-3" / "themerc").write_text("border.width: 1\n", encoding="utf-8")
    return theme


def make_icon_theme(root: Path, name: str) -> Path:
    theme = root / name
    theme.mkdir(parents=True)
    (theme / "index.theme").write_text(f"[Icon Theme]\nName={name}\n", encoding="utf-8")
    return theme


@pytest.fixture
def asset_tree(tmp_path):
    """A small machine layout: two theme roots, one icon root, kitty and wallpaper dirs."""
    themes_a = tmp_path / "usr" / "themes"
    themes_b = tmp_path / "local" / "themes"
    icons = tmp_path / "usr" / "icons"
    kitty = tmp_path / "kitty" / "themes"
    walls = tmp_path / "walls"
    for directory in (themes_a, themes_b, icons, kitty, walls):
        directory.mkdir(parents=True)

    make_gtk_theme(themes_a, "Gruvbox-Dark", openbox=True)
    make_gtk_theme(themes_a, "Gruvbox-Light")
    make_gtk_theme(themes_b, "Nordic", gtk4=True, openbox=True)
    make_gtk_theme(themes_b, "Gruvbox-Dark")

    make_icon_theme(icons, "Papirus-Dark")
    make_icon_theme(icons, "Gruvbox-Plus-Dark")

    (kitty / "Gruvbox Dark.conf").write_text("background #282828\n", encoding="utf-8")
    (kitty / "Nord.conf").write_text("background #2e3440\n", encoding="utf-8")

    (walls / "gruvbox-forest.png").write_bytes(b"\x89PNG")
    (walls / "nord-mountains.jpg").write_bytes(b"\xff\xd8")

    return {
        "themes": [themes_a, themes_b],
        "icons": [icons],
        "kitty": kitty,
        "walls": walls,
    }


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
