"""Main window: current selection, category panels and apply."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import QThread, Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QFormLayout, QGroupBox, QHBoxLayout, QLabel, QMainWindow, QMessageBox,
    QPushButton, QTabWidget, QVBoxLayout, QWidget,
)

from labwcchanger.core.applier import ApplyPaths, ApplyReport
from labwcchanger.core.scanner import Category, SearchRoots
from labwcchanger.core.selection import SelectionBundle
from labwcchanger.core.styles import StyleTable, apply_style
from labwcchanger.ui.utils import empty_dash, first_line, release_worker
from labwcchanger.ui.widgets.asset_list import AssetList
from labwcchanger.ui.widgets.status_strip import StatusStrip
from labwcchanger.workers.apply_worker import ApplyWorker
from labwcchanger.workers.discovery_worker import DiscoveryResult, DiscoveryWorker

if TYPE_CHECKING:
    from labwcchanger.config.settings import AppSettings

logger = logging.getLogger(__name__)

STYLE_TAB = "Style"

# Order of the "Current Selection" rows.
SELECTION_ROWS: tuple[Category, ...] = (
    Category.GTK_THEME,
    Category.ICON_THEME,
    Category.WINDOW_MANAGER_THEME,
    Category.TERMINAL_SCHEME,
    Category.WALLPAPER,
)

# Order of the panel tabs after the Style tab.
PANEL_TABS: tuple[Category, ...] = (
    Category.GTK_THEME,
    Category.ICON_THEME,
    Category.WINDOW_MANAGER_THEME,
    Category.TERMINAL_SCHEME,
    Category.WALLPAPER,
)

STATUS_PREFIX: dict[Category, str] = {
    Category.GTK_THEME: "GTK",
    Category.ICON_THEME: "Icons",
    Category.WINDOW_MANAGER_THEME: "LabWC",
    Category.TERMINAL_SCHEME: "Kitty",
    Category.WALLPAPER: "Wallpaper",
}


class MainWindow(QMainWindow):
    """Pick a style or individual assets, then apply them."""

    def __init__(self, settings: AppSettings, style_table: StyleTable) -> None:
        super().__init__()
        self._settings = settings
        self._style_table = style_table
        self._selection = SelectionBundle()
        self._discovery = DiscoveryResult()
        self._discovery_worker: DiscoveryWorker | None = None
        self._discovery_thread: QThread | None = None
        self._apply_worker: ApplyWorker | None = None
        self._apply_thread: QThread | None = None

        self.setWindowTitle("LabWC Theme Changer")
        self.setMinimumSize(520, 560)

        self._setup_layout()
        self._setup_actions()
        self._restore_state()

    # -- layout --

    def _setup_layout(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        outer = QVBoxLayout(central)
        outer.setContentsMargins(8, 8, 8, 0)

        selection_group = QGroupBox("Current Selection")
        form = QFormLayout(selection_group)
        self._selection_labels: dict[Category, QLabel] = {}
        for category in SELECTION_ROWS:
            label = QLabel(empty_dash(""))
            label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            self._selection_labels[category] = label
            title = "Wallpaper" if category is Category.WALLPAPER else category.label
            form.addRow(f"{title}:", label)
        outer.addWidget(selection_group)

        self._tabs = QTabWidget()
        self._style_list = AssetList("Filter styles…")
        self._style_list.item_chosen.connect(self._on_style_chosen)
        self._tabs.addTab(self._style_list, STYLE_TAB)

        self._panels: dict[Category, AssetList] = {}
        for category in PANEL_TABS:
            panel = AssetList()
            panel.item_chosen.connect(
                lambda name, category=category: self._on_asset_chosen(category, name)
            )
            self._panels[category] = panel
            self._tabs.addTab(panel, category.label)
        outer.addWidget(self._tabs, 1)

        buttons = QHBoxLayout()
        self._reload_btn = QPushButton("Reload")
        self._reload_btn.clicked.connect(self.start_discovery)
        self._apply_btn = QPushButton("Apply")
        self._apply_btn.setProperty("role", "accent")
        self._apply_btn.setEnabled(False)
        self._apply_btn.clicked.connect(self.start_apply)
        buttons.addWidget(self._reload_btn)
        buttons.addStretch(1)
        buttons.addWidget(self._apply_btn)
        outer.addLayout(buttons)

        self._status = StatusStrip()
        outer.addWidget(self._status)

    def _setup_actions(self) -> None:
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)
        apply_action = QAction("Apply", self)
        apply_action.setShortcut(QKeySequence("Ctrl+Return"))
        apply_action.triggered.connect(self.start_apply)
        reload_action = QAction("Reload", self)
        reload_action.setShortcut(QKeySequence("F5"))
        reload_action.triggered.connect(self.start_discovery)
        for action in (quit_action, apply_action, reload_action):
            self.addAction(action)

    def _restore_state(self) -> None:
        geometry = self._settings.window_geometry
        if geometry:
            self.restoreGeometry(geometry)

    # -- discovery --

    def start_discovery(self) -> None:
        if self._discovery_thread and self._discovery_thread.isRunning():
            return
        self._reload_btn.setEnabled(False)
        self._status.show_message("Loading…")
        self._status.show_busy()

        self._discovery_worker = DiscoveryWorker(
            SearchRoots.from_settings(self._settings),
            self._style_table,
        )
        self._discovery_thread = QThread()
        self._discovery_worker.moveToThread(self._discovery_thread)
        self._discovery_thread.started.connect(self._discovery_worker.run)
        self._discovery_worker.progress.connect(
            self._on_discovery_progress,
            Qt.ConnectionType.QueuedConnection,
        )
        self._discovery_worker.finished.connect(self._on_discovery_done)
        self._discovery_worker.error.connect(self._on_discovery_error)
        for signal in (
            self._discovery_worker.finished,
            self._discovery_worker.error,
            self._discovery_worker.cancelled,
        ):
            signal.connect(self._discovery_thread.quit)
        self._discovery_thread.finished.connect(self._cleanup_discovery)
        self._discovery_thread.start()

    def _on_discovery_progress(self, step: int, total: int, message: str) -> None:
        self._status.show_busy(step, total)
        self._status.show_message(f"{message}…")

    def _on_discovery_done(self, result: DiscoveryResult) -> None:
        self._discovery = result
        # active settings only seed unset slots so a reload keeps unapplied picks
        self._selection.fill_empty(
            SelectionBundle(
                gtk_theme=result.current.gtk_theme,
                icon_theme=result.current.icon_theme,
                wm_theme=result.current.wm_theme,
            )
        )

        self._style_list.set_items(result.styles)
        self._tabs.setTabText(0, f"{STYLE_TAB} ({len(result.styles)})")
        total = 0
        for index, category in enumerate(PANEL_TABS, start=1):
            panel = self._panels[category]
            panel.set_items(result.names(category))
            total += panel.count()
            self._tabs.setTabText(index, f"{category.label} ({panel.count()})")

        self._style_list.select_name(self._settings.last_style)
        self._sync_selection_view()
        self._status.set_asset_count(total)
        self._status.hide_busy()
        self._status.show_message("Ready")
        self._reload_btn.setEnabled(True)
        self._apply_btn.setEnabled(True)

    def _on_discovery_error(self, message: str) -> None:
        self._status.hide_busy()
        self._status.show_message(f"Load failed: {first_line(message)}")
        self._reload_btn.setEnabled(True)
        logger.warning("discovery failed: %s", message)

    def _cleanup_discovery(self) -> None:
        release_worker(self._discovery_worker, self._discovery_thread)
        self._discovery_worker = None
        self._discovery_thread = None

    # -- selection --

    def _on_style_chosen(self, style: str) -> None:
        result = self._discovery
        picked = apply_style(
            style,
            result.names(Category.WINDOW_MANAGER_THEME),
            result.names(Category.GTK_THEME),
            result.names(Category.ICON_THEME),
            result.names(Category.TERMINAL_SCHEME),
            result.names(Category.WALLPAPER),
            self._style_table,
        )
        self._selection.merge(picked)
        self._settings.last_style = style
        self._sync_selection_view()
        self._status.show_message(f"Style applied: {style}")

    def _on_asset_chosen(self, category: Category, name: str) -> None:
        self._selection.set(category, name)
        self._sync_selection_view()
        self._status.show_message(f"{STATUS_PREFIX[category]}: {name}")

    def _sync_selection_view(self) -> None:
        for category, value in self._selection.items():
            self._selection_labels[category].setText(empty_dash(value))
            self._panels[category].select_name(value)

    # -- apply --

    def start_apply(self) -> None:
        if self._apply_thread and self._apply_thread.isRunning():
            return
        if self._selection.is_empty():
            self._status.show_message("Nothing selected", 3000)
            return
        self._apply_btn.setEnabled(False)
        self._status.show_message("Applying…")
        self._status.show_busy()

        self._apply_worker = ApplyWorker(
            self._selection,
            ApplyPaths.from_settings(self._settings),
        )
        self._apply_thread = QThread()
        self._apply_worker.moveToThread(self._apply_thread)
        self._apply_thread.started.connect(self._apply_worker.run)
        self._apply_worker.finished.connect(self._on_apply_done)
        self._apply_worker.error.connect(self._on_apply_error)
        self._apply_worker.finished.connect(self._apply_thread.quit)
        self._apply_worker.error.connect(self._apply_thread.quit)
        self._apply_thread.finished.connect(self._cleanup_apply)
        self._apply_thread.start()

    def _on_apply_done(self, report: ApplyReport) -> None:
        self._status.hide_busy()
        self._apply_btn.setEnabled(True)
        if report.warnings:
            self._status.show_message(
                f"Applied with warnings: {first_line(report.warnings[0])}"
            )
        else:
            self._status.show_message("Applied successfully!")

    def _on_apply_error(self, message: str) -> None:
        self._status.hide_busy()
        self._apply_btn.setEnabled(True)
        self._status.show_message(f"Apply failed: {first_line(message)}")
        QMessageBox.critical(self, "Apply Failed", message)

    def _cleanup_apply(self) -> None:
        release_worker(self._apply_worker, self._apply_thread)
        self._apply_worker = None
        self._apply_thread = None

    # -- shutdown --

    def closeEvent(self, event) -> None:
        self._settings.window_geometry = self.saveGeometry()
        if self._discovery_worker:
            self._discovery_worker.cancel()
        for thread in (self._discovery_thread, self._apply_thread):
            if thread and thread.isRunning():
                thread.quit()
                thread.wait()
        super().closeEvent(event)
