"""Comparison logic deciding what happens to each mod."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .policy import SyncPolicy


class SyncAction(str, Enum):
    """Actions that can be taken during sync."""

    WRITE_NEW = "write_new"
    """Write server mod, no local mod with this name exists"""

    REPLACE_WITH_BACKUP = "replace_with_backup"
    """Move differing local mod to backup, then write server mod"""

    OVERWRITE = "overwrite"
    """Write server mod without looking at local state (forced)"""

    SKIP = "skip"
    """Local mod has the same size, no I/O needed"""

    BACKUP_ORPHAN = "backup_orphan"
    """Local mod is not on the server and is moved to backup"""

    @property
    def writes(self) -> bool:
        """Whether this action writes the server mod to disk."""
        return self in (
            SyncAction.WRITE_NEW,
            SyncAction.REPLACE_WITH_BACKUP,
            SyncAction.OVERWRITE,
        )


@dataclass
class SyncDecision:
    """Represents a decision about how to sync a mod."""

    action: SyncAction
    """Action to take"""

    reason: str
    """Human-readable reason for this decision"""

    name: str
    """File name of the mod"""

    remote_size: Optional[int] = None
    """Size of the server mod (None for orphans)"""

    local_size: Optional[int] = None
    """Size of the local mod (None if absent or not looked up)"""


class ModComparator:
    """Compares server mods against the local inventory.

    Two mods with the same name and the same byte length are considered
    identical. No content hashing is done.
    """

    def __init__(self, policy: SyncPolicy):
        """Initialize mod comparator.

        Args:
            policy: Sync policy to apply
        """
        self.policy = policy

    def compare(
        self, name: str, remote_size: int, local_size: Optional[int]
    ) -> SyncDecision:
        """Decide what to do with a single server mod.

        Args:
            name: File name of the server mod
            remote_size: Size of the server mod in bytes
            local_size: Size of the local mod with the same name, or None
                if there is none

        Returns:
            SyncDecision for this mod
        """
        if self.policy.force:
            return SyncDecision(
                action=SyncAction.OVERWRITE,
                reason="Forced overwrite",
                name=name,
                remote_size=remote_size,
                local_size=local_size,
            )

        if local_size is None:
            return SyncDecision(
                action=SyncAction.WRITE_NEW,
                reason="New server mod",
                name=name,
                remote_size=remote_size,
            )

        if local_size != remote_size:
            return SyncDecision(
                action=SyncAction.REPLACE_WITH_BACKUP,
                reason=f"Sizes differ ({local_size} vs {remote_size})",
                name=name,
                remote_size=remote_size,
                local_size=local_size,
            )

        return SyncDecision(
            action=SyncAction.SKIP,
            reason="Mods are identical (same size)",
            name=name,
            remote_size=remote_size,
            local_size=local_size,
        )

    def orphan(self, name: str, local_size: Optional[int]) -> SyncDecision:
        """Decide what to do with a local mod the server does not have.

        Only consulted when the policy backs up orphans.

        Args:
            name: File name of the local mod
            local_size: Size of the local mod in bytes

        Returns:
            SyncDecision for this mod
        """
        return SyncDecision(
            action=SyncAction.BACKUP_ORPHAN,
            reason="Local mod not on server",
            name=name,
            local_size=local_size,
        )
