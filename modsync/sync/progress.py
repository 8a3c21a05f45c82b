"""Progress events emitted during a sync.

The engine reports three kinds of events to an observer: a server mod is
about to be written, a local mod is about to be moved to the backup
directory, and a phase has completed one more task. Write and backup events
are delivered from worker threads, so observers must be thread-safe.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Protocol


class SyncEvent(str, Enum):
    """Kinds of progress events."""

    WRITE_STARTED = "write_started"
    BACKUP_STARTED = "backup_started"
    PROGRESS_UPDATED = "progress_updated"


@dataclass
class SyncEventInfo:
    """Information carried by a progress event."""

    event: SyncEvent
    """Kind of event"""

    name: str = ""
    """File name of the mod (write and backup events)"""

    size: Optional[int] = None
    """Size of the server mod being written"""

    source: Any = None
    """Server mod being written"""

    source_path: Optional[Path] = None
    """Path the mod is moved from (backup events)"""

    dest_path: Optional[Path] = None
    """Path the mod is written or moved to"""

    phase: str = ""
    """Phase name, "write" or "backup" (progress events)"""

    current: int = 0
    """Number of completed tasks in the phase"""

    total: int = 0
    """Number of tasks in the phase"""


class SyncObserver(Protocol):
    """Receives progress events."""

    def notify(self, info: SyncEventInfo) -> None: ...


class NullObserver:
    """Observer that ignores all events."""

    def notify(self, info: SyncEventInfo) -> None:
        pass


class CallbackObserver:
    """Observer dispatching events to optional callbacks.

    Examples:
        >>> observer = CallbackObserver(
        ...     on_progress=lambda phase, current, total: print(phase, current)
        ... )
    """

    def __init__(
        self,
        on_write: Optional[Callable[[Any, Path], None]] = None,
        on_backup: Optional[Callable[[str, Path, Path], None]] = None,
        on_progress: Optional[Callable[[str, int, int], None]] = None,
    ):
        """Initialize callback observer.

        Args:
            on_write: Called with (server mod, destination path)
            on_backup: Called with (name, source path, backup path)
            on_progress: Called with (phase, current, total)
        """
        self.on_write = on_write
        self.on_backup = on_backup
        self.on_progress = on_progress

    def notify(self, info: SyncEventInfo) -> None:
        if info.event == SyncEvent.WRITE_STARTED:
            if self.on_write and info.dest_path is not None:
                self.on_write(info.source, info.dest_path)
        elif info.event == SyncEvent.BACKUP_STARTED:
            if (
                self.on_backup
                and info.source_path is not None
                and info.dest_path is not None
            ):
                self.on_backup(info.name, info.source_path, info.dest_path)
        elif info.event == SyncEvent.PROGRESS_UPDATED:
            if self.on_progress:
                self.on_progress(info.phase, info.current, info.total)
