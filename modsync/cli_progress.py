"""CLI progress display for sync operations.

This module provides a Rich-based progress display that acts as the sync
engine's observer.
"""

import threading
from typing import Optional

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from .sync.progress import SyncEvent, SyncEventInfo
from .utils import PHASE_BACKUP, PHASE_WRITE, format_size

_PHASE_LABELS = {
    PHASE_WRITE: "Writing mods",
    PHASE_BACKUP: "Backing up mods",
}


class SyncProgressDisplay:
    """Rich-based progress display for sync operations.

    One progress bar is shown per phase. The bar's detail column shows the
    mod most recently started.
    """

    def __init__(self) -> None:
        """Initialize the progress display."""
        self._progress: Optional[Progress] = None
        self._tasks: dict[str, TaskID] = {}
        self._lock = threading.Lock()

    def _get_task(self, phase: str, total: Optional[int] = None) -> Optional[TaskID]:
        if self._progress is None:
            return None
        # Write and backup events arrive from worker threads
        with self._lock:
            if phase not in self._tasks:
                self._tasks[phase] = self._progress.add_task(
                    _PHASE_LABELS.get(phase, phase), total=total, detail=""
                )
            return self._tasks[phase]

    def notify(self, info: SyncEventInfo) -> None:
        """Handle a progress event from the sync engine.

        Args:
            info: Progress information
        """
        if self._progress is None:
            return

        if info.event == SyncEvent.WRITE_STARTED:
            task = self._get_task(PHASE_WRITE)
            if task is not None:
                size = format_size(info.size) if info.size is not None else "?"
                self._progress.update(task, detail=f"{info.name} ({size})")

        elif info.event == SyncEvent.BACKUP_STARTED:
            # Replaced mods are backed up during the write phase
            with self._lock:
                phase = PHASE_BACKUP if PHASE_BACKUP in self._tasks else PHASE_WRITE
            task = self._get_task(phase)
            if task is not None:
                self._progress.update(task, detail=f"{info.name} -> backup")

        elif info.event == SyncEvent.PROGRESS_UPDATED:
            task = self._get_task(info.phase, total=info.total)
            if task is not None:
                self._progress.update(task, completed=info.current, total=info.total)
                if info.current == info.total:
                    self._progress.update(task, detail="done")

    def __enter__(self) -> "SyncProgressDisplay":
        """Enter context manager - start progress display."""
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TextColumn("[cyan]{task.fields[detail]}"),
            TimeElapsedColumn(),
            refresh_per_second=4,
            transient=False,
        )
        self._progress.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager - stop progress display."""
        if self._progress is not None:
            self._progress.__exit__(exc_type, exc_val, exc_tb)
            self._progress = None
            self._tasks = {}
