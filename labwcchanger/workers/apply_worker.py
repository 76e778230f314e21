"""Worker for writing a selection to the desktop configuration."""

from __future__ import annotations

from dataclasses import replace

from labwcchanger.core.applier import ApplyPaths, ApplyReport, apply_selection
from labwcchanger.core.selection import SelectionBundle
from labwcchanger.workers.base_worker import BaseWorker


class ApplyWorker(BaseWorker):
    """Runs the config writer off the UI thread."""

    def __init__(self, selection: SelectionBundle, paths: ApplyPaths | None = None) -> None:
        super().__init__()
        # copy so later picks in the UI don't leak into this run
        self._selection = replace(selection)
        self._paths = paths

    def _execute(self) -> ApplyReport:
        self.progress.emit(0, 1, "Applying")
        report = apply_selection(self._selection, self._paths)
        self.progress.emit(1, 1, "Applied")
        return report
