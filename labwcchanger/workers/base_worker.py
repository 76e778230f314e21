"""Shared signals and cancellation for background theme workers."""

from __future__ import annotations

from threading import Event

from PySide6.QtCore import QObject, Signal

from labwcchanger.errors import format_error_for_user


class BaseWorker(QObject):
    """Background unit run on a QThread via moveToThread.

    Subclasses implement ``_execute`` and return the result object; ``run``
    wraps it with the started/finished/error/cancelled signals.
    """

    started = Signal()
    progress = Signal(int, int, str)    # step, total steps, message
    finished = Signal(object)           # result data
    error = Signal(str)                 # user-facing error message
    cancelled = Signal()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._cancel_event = Event()

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def _is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self) -> None:
        self.started.emit()
        try:
            result = self._execute()
        except Exception as exc:
            self.error.emit(format_error_for_user(exc))
            return
        if self._is_cancelled:
            self.cancelled.emit()
            return
        self.finished.emit(result)

    def _execute(self) -> object:
        """Override in subclass. Return None after noticing cancellation."""
        raise NotImplementedError
