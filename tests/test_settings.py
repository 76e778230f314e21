"""Tests for labwcchanger.config.settings."""

from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from labwcchanger import runtime_paths
from labwcchanger.config.settings import AppSettings


@pytest.fixture
def settings(tmp_path, monkeypatch, qapp):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    app_settings = AppSettings()
    app_settings._qs = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return app_settings


class TestAppSettings:
    def test_dirs_default_to_runtime_paths(self, settings):
        assert settings.wallpaper_dir == str(runtime_paths.wallpaper_dir())
        assert settings.kitty_themes_dir == str(runtime_paths.kitty_themes_dir())

    def test_dirs_round_trip_and_strip(self, settings):
        settings.wallpaper_dir = "  /data/walls "
        assert settings.wallpaper_dir == "/data/walls"
        settings.wallpaper_dir = ""
        assert settings.wallpaper_dir == str(runtime_paths.wallpaper_dir())

    def test_extra_dirs_drop_blanks(self, settings):
        settings.extra_theme_dirs = ["/opt/themes", "  ", "/srv/themes"]
        assert settings.extra_theme_dirs == ["/opt/themes", "/srv/themes"]
        assert settings.extra_icon_dirs == []

    def test_last_style(self, settings):
        assert settings.last_style == ""
        settings.last_style = "Gruvbox Dark"
        assert settings.last_style == "Gruvbox Dark"

    def test_app_data_dir_follows_xdg(self, settings, tmp_path):
        assert settings.app_data_dir == tmp_path / "config" / "labwcchanger"
        assert settings.app_data_dir.is_dir()
        assert settings.user_styles_path == tmp_path / "config" / "labwcchanger" / "styles.yaml"
