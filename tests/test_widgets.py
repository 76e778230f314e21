"""Tests for labwcchanger.ui widgets."""

from unittest.mock import MagicMock

import pytest

from labwcchanger.core.current import CurrentSettings
from labwcchanger.core.scanner import Category
from labwcchanger.core.styles import default_style_table
from labwcchanger.ui.main_window import MainWindow
from labwcchanger.ui.utils import empty_dash, first_line
from labwcchanger.ui.widgets import AssetList, StatusStrip
from labwcchanger.workers.discovery_worker import DiscoveryResult


@pytest.fixture
def asset_list(qapp):
    widget = AssetList()
    widget.set_items(["Gruvbox-Dark", "Gruvbox-Light", "Nordic"])
    return widget


class TestAssetList:
    def test_count(self, asset_list):
        assert asset_list.count() == 3

    def test_select_name(self, asset_list):
        assert asset_list.select_name("Nordic")
        assert asset_list.current_name() == "Nordic"

    def test_select_unknown_or_blank(self, asset_list):
        assert asset_list.select_name("Dracula") is False
        assert asset_list.select_name("") is False

    def test_filter_hides_non_matching(self, asset_list):
        asset_list._apply_filter("GRUV")
        hidden = [asset_list._list.item(row).isHidden() for row in range(asset_list.count())]
        assert hidden == [False, False, True]
        asset_list._apply_filter("")
        assert not any(asset_list._list.item(row).isHidden() for row in range(asset_list.count()))

    def test_activation_emits_name(self, asset_list):
        chosen: list[str] = []
        asset_list.item_chosen.connect(lambda name: chosen.append(name))
        asset_list._on_activated(asset_list._list.item(1))
        assert chosen == ["Gruvbox-Light"]


class TestStatusStrip:
    def test_message_and_count(self, qapp):
        strip = StatusStrip()
        strip.show_message("Ready")
        assert strip._message_label.text() == "Ready"
        strip.set_asset_count(12)
        assert strip._asset_count_label.text() == "12 assets"
        strip.set_asset_count(0)
        assert strip._asset_count_label.text() == ""


class TestUtils:
    def test_first_line(self):
        assert first_line("Apply failed\r\nsecond") == "Apply failed"

    def test_empty_dash(self):
        assert empty_dash("  ") == "—"
        assert empty_dash("Nord") == "Nord"


def _discovery() -> DiscoveryResult:
    return DiscoveryResult(
        assets={
            Category.GTK_THEME: ["Adwaita", "Gruvbox-Dark", "Nordic"],
            Category.ICON_THEME: ["Papirus"],
            Category.WINDOW_MANAGER_THEME: ["GTK", "Nordic"],
        },
        styles=["Gruvbox Dark"],
        current=CurrentSettings(gtk_theme="Adwaita", icon_theme="Papirus", wm_theme="GTK"),
    )


@pytest.fixture
def window(qapp):
    settings = MagicMock()
    settings.window_geometry = None
    settings.last_style = ""
    win = MainWindow(settings, default_style_table())
    yield win
    win.deleteLater()


class TestMainWindow:
    def test_first_discovery_seeds_current_settings(self, window):
        window._on_discovery_done(_discovery())
        assert window._selection.gtk_theme == "Adwaita"
        assert window._selection.wm_theme == "GTK"

    def test_reload_keeps_unapplied_picks(self, window):
        window._on_discovery_done(_discovery())
        window._on_asset_chosen(Category.GTK_THEME, "Gruvbox-Dark")

        window._on_discovery_done(_discovery())

        assert window._selection.gtk_theme == "Gruvbox-Dark"
        assert window._selection.icon_theme == "Papirus"

    def test_tab_titles_show_counts(self, window):
        window._on_discovery_done(_discovery())
        assert window._tabs.tabText(0) == "Style (1)"
        assert window._tabs.tabText(1) == "GTK (3)"
        assert window._tabs.tabText(5) == "Walls (0)"
