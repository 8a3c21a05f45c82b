"""Sync policy flags."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SyncPolicy:
    """Options controlling how server mods replace local mods."""

    force: bool = False
    """Always overwrite local mods with server mods, never comparing sizes"""

    keep_existing: bool = False
    """Never back up local mods that are not on the server"""

    @property
    def requires_local_scan(self) -> bool:
        """Whether the mods directory must be scanned before syncing.

        With both flags set every server mod is written unconditionally and
        nothing is ever backed up, so local state is irrelevant.
        """
        return not (self.force and self.keep_existing)

    @property
    def backs_up_orphans(self) -> bool:
        """Whether local-only mods are moved into the backup directory."""
        return not self.keep_existing
