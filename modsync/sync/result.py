"""Outcome of a successful sync."""

from dataclasses import dataclass, field

from .comparator import SyncAction, SyncDecision


@dataclass
class SyncResult:
    """Names of the mods handled by each action during a sync.

    Lists are kept sorted by name; workers finish in arbitrary order.
    """

    written: list[str] = field(default_factory=list)
    """Server mods written because no local mod existed"""

    replaced: list[str] = field(default_factory=list)
    """Server mods written after the differing local mod was backed up"""

    overwritten: list[str] = field(default_factory=list)
    """Server mods written unconditionally (forced)"""

    skipped: list[str] = field(default_factory=list)
    """Server mods already present with the same size"""

    backed_up: list[str] = field(default_factory=list)
    """Local mods moved to backup because the server does not have them"""

    def record(self, decisions: list[SyncDecision]) -> None:
        """Add completed decisions to the result."""
        targets = {
            SyncAction.WRITE_NEW: self.written,
            SyncAction.REPLACE_WITH_BACKUP: self.replaced,
            SyncAction.OVERWRITE: self.overwritten,
            SyncAction.SKIP: self.skipped,
            SyncAction.BACKUP_ORPHAN: self.backed_up,
        }
        for decision in decisions:
            targets[decision.action].append(decision.name)
        for names in targets.values():
            names.sort()

    @property
    def total_writes(self) -> int:
        """Number of server mods written to disk."""
        return len(self.written) + len(self.replaced) + len(self.overwritten)

    @property
    def total_backups(self) -> int:
        """Number of local mods moved into the backup directory."""
        return len(self.replaced) + len(self.backed_up)

    def to_dict(self) -> dict:
        """Convert the result to a dictionary of counts and names."""
        return {
            "writes": self.total_writes,
            "backups": self.total_backups,
            "skips": len(self.skipped),
            "written": list(self.written),
            "replaced": list(self.replaced),
            "overwritten": list(self.overwritten),
            "skipped": list(self.skipped),
            "backed_up": list(self.backed_up),
        }
