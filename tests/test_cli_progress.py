"""Tests for the rich progress display."""

from pathlib import Path

from modsync.cli_progress import SyncProgressDisplay
from modsync.sync.progress import SyncEvent, SyncEventInfo
from modsync.utils import PHASE_BACKUP, PHASE_WRITE


class _LockCheckingTasks(dict):
    """Phase table that fails when read without holding the display lock."""

    def __init__(self, lock):
        super().__init__()
        self._lock = lock

    def __contains__(self, key):
        assert self._lock.locked(), "phase table read without the lock"
        return super().__contains__(key)


def backup_started(name: str) -> SyncEventInfo:
    return SyncEventInfo(
        event=SyncEvent.BACKUP_STARTED,
        name=name,
        source_path=Path("mods") / name,
        dest_path=Path("mods") / "backup" / name,
    )


def details(display: SyncProgressDisplay) -> dict[str, str]:
    return {
        task.description: task.fields["detail"] for task in display._progress.tasks
    }


class TestSyncProgressDisplay:
    """Tests for SyncProgressDisplay."""

    def test_events_before_enter_are_ignored(self):
        display = SyncProgressDisplay()

        display.notify(backup_started("a.jar"))

        assert display._tasks == {}

    def test_replacement_backup_shown_on_write_bar(self):
        with SyncProgressDisplay() as display:
            display.notify(backup_started("a.jar"))

            assert list(display._tasks) == [PHASE_WRITE]
            assert details(display) == {"Writing mods": "a.jar -> backup"}

    def test_orphan_backup_shown_on_backup_bar(self):
        with SyncProgressDisplay() as display:
            display.notify(
                SyncEventInfo(
                    event=SyncEvent.PROGRESS_UPDATED,
                    phase=PHASE_BACKUP,
                    current=0,
                    total=2,
                )
            )
            display.notify(backup_started("b.jar"))

            assert details(display) == {"Backing up mods": "b.jar -> backup"}

    def test_backup_event_reads_phases_under_lock(self):
        with SyncProgressDisplay() as display:
            display._tasks = _LockCheckingTasks(display._lock)

            display.notify(backup_started("a.jar"))

            assert PHASE_WRITE in dict(display._tasks)

    def test_progress_marks_phase_done(self):
        with SyncProgressDisplay() as display:
            display.notify(
                SyncEventInfo(
                    event=SyncEvent.PROGRESS_UPDATED,
                    phase=PHASE_WRITE,
                    current=3,
                    total=3,
                )
            )

            (task,) = display._progress.tasks
            assert task.completed == 3
            assert task.fields["detail"] == "done"
