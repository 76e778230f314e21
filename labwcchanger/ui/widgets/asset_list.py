"""Filterable list of asset names for one category."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLineEdit, QListWidget, QListWidgetItem, QVBoxLayout, QWidget


class AssetList(QWidget):
    """A filter box above a single-selection list; emits the activated name."""

    item_chosen = Signal(str)

    def __init__(self, placeholder: str = "Filter…", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self._filter_edit = QLineEdit()
        self._filter_edit.setPlaceholderText(placeholder)
        self._filter_edit.setClearButtonEnabled(True)
        self._filter_edit.textChanged.connect(self._apply_filter)
        layout.addWidget(self._filter_edit)

        self._list = QListWidget()
        self._list.setUniformItemSizes(True)
        self._list.itemActivated.connect(self._on_activated)
        layout.addWidget(self._list, 1)

    def set_items(self, names: list[str]) -> None:
        self._list.clear()
        for name in names:
            self._list.addItem(QListWidgetItem(name))
        self._apply_filter(self._filter_edit.text())

    def count(self) -> int:
        return self._list.count()

    def select_name(self, name: str) -> bool:
        """Move the cursor to ``name``; returns False if it is not listed."""
        if not name:
            return False
        matches = self._list.findItems(name, Qt.MatchFlag.MatchExactly)
        if not matches:
            return False
        self._list.setCurrentItem(matches[0])
        self._list.scrollToItem(matches[0])
        return True

    def current_name(self) -> str:
        item = self._list.currentItem()
        return item.text() if item is not None else ""

    def _apply_filter(self, text: str) -> None:
        needle = text.strip().lower()
        for row in range(self._list.count()):
            item = self._list.item(row)
            item.setHidden(bool(needle) and needle not in item.text().lower())

    def _on_activated(self, item: QListWidgetItem) -> None:
        self.item_chosen.emit(item.text())
