"""Common utilities for UI components."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QThread, SignalInstance

from labwcchanger.workers.base_worker import BaseWorker


def safe_disconnect(signal: SignalInstance, slot: Optional[Callable] = None) -> bool:
    """Disconnect a slot (or all slots) without raising if already disconnected."""
    try:
        if slot is not None:
            signal.disconnect(slot)
        else:
            signal.disconnect()
        return True
    except (RuntimeError, TypeError):
        return False


def release_worker(worker: BaseWorker | None, thread: QThread | None) -> None:
    """Disconnect a finished worker's signals and schedule both objects for deletion."""
    if worker is not None:
        for signal in (worker.progress, worker.finished, worker.error, worker.cancelled):
            safe_disconnect(signal)
        worker.deleteLater()
    if thread is not None:
        thread.deleteLater()


def first_line(text: str) -> str:
    """First line of a possibly multi-line message."""
    return text.replace("\r\n", "\n").split("\n", 1)[0]


def empty_dash(value: str) -> str:
    return value if value.strip() else "—"
