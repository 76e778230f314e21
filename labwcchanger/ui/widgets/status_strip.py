"""Bottom status strip with message, busy indicator and asset totals."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QProgressBar, QWidget,
)

from labwcchanger import __version__


class StatusStrip(QFrame):
    """Compact bottom status bar."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("StatusStrip")
        self.setFixedHeight(30)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 0, 10, 0)
        layout.setSpacing(10)

        self._message_label = QLabel("Loading…")
        self._message_label.setObjectName("StatusMessage")
        layout.addWidget(self._message_label)

        layout.addStretch(1)

        self._busy_bar = QProgressBar()
        self._busy_bar.setFixedWidth(120)
        self._busy_bar.setFixedHeight(12)
        self._busy_bar.setTextVisible(False)
        self._busy_bar.hide()
        layout.addWidget(self._busy_bar)

        self._asset_count_label = QLabel("")
        self._asset_count_label.setObjectName("StatusDetail")
        layout.addWidget(self._asset_count_label)

        self._version_label = QLabel(f"v{__version__}")
        self._version_label.setObjectName("StatusMuted")
        layout.addWidget(self._version_label)

        self._clear_timer = QTimer(self)
        self._clear_timer.setSingleShot(True)
        self._clear_timer.timeout.connect(lambda: self._message_label.setText("Ready"))

    def show_message(self, text: str, timeout_ms: int = 0) -> None:
        self._clear_timer.stop()
        self._message_label.setText(text)
        if timeout_ms > 0:
            self._clear_timer.start(timeout_ms)

    def show_busy(self, step: int = 0, total: int = 0) -> None:
        # total == 0 puts the bar in indeterminate mode
        self._busy_bar.setMaximum(total)
        self._busy_bar.setValue(step)
        self._busy_bar.show()

    def hide_busy(self) -> None:
        self._busy_bar.hide()

    def set_asset_count(self, total: int) -> None:
        self._asset_count_label.setText(f"{total} assets" if total else "")
