"""Core sync engine reconciling the mods directory with a server."""

import logging
import time
from functools import partial
from pathlib import Path
from typing import Iterable, Optional

from ..exceptions import DirectoryError, NoRemoteArtifactsError
from ..paths import ModPaths
from ..remote import RemoteMod, Server
from ..utils import DIR_MODE, PHASE_BACKUP, PHASE_WRITE
from .comparator import ModComparator, SyncAction, SyncDecision
from .executor import TransferExecutor
from .inventory import LocalInventory
from .operations import backup_mod, write_mod
from .policy import SyncPolicy
from .progress import NullObserver, SyncEvent, SyncEventInfo, SyncObserver
from .result import SyncResult
from .scanner import ModScanner

logger = logging.getLogger(__name__)


class SyncEngine:
    """Makes the local mods directory match a server's set of mods.

    A sync runs in two phases separated by a barrier. The write phase
    handles every server mod concurrently: new mods are written, mods whose
    size differs from the local copy replace it after the local copy has
    been moved to the backup directory, and mods of equal size are left
    alone. The backup phase then moves every local mod the server does not
    have into the backup directory, unless existing mods are kept.

    The first failure aborts the run. Whatever was already written or moved
    stays in place; running the sync again converges.
    """

    def __init__(
        self,
        paths: ModPaths,
        observer: Optional[SyncObserver] = None,
        scanner: Optional[ModScanner] = None,
    ):
        """Initialize sync engine.

        Args:
            paths: Install, mods and backup directories
            observer: Receives progress events (defaults to a no-op observer)
            scanner: Scanner used to list local mods
        """
        self.paths = paths
        self.observer = observer or NullObserver()
        self.scanner = scanner or ModScanner()
        self.executor = TransferExecutor(self.observer)

    def sync_server(
        self, server: Server, policy: Optional[SyncPolicy] = None
    ) -> SyncResult:
        """Fetch the server's mods and sync them.

        Args:
            server: Mod server to sync from
            policy: Sync policy (defaults to no force, no keep-existing)

        Returns:
            SyncResult describing what was done

        Examples:
            >>> engine = SyncEngine(resolve_paths())
            >>> result = engine.sync_server(HTTPServer("https://mods.example.com"))
            >>> print(f"Wrote {result.total_writes} mod(s)")
        """
        mods = server.mods()
        return self.sync(mods, policy)

    def sync(
        self, mods: Iterable[RemoteMod], policy: Optional[SyncPolicy] = None
    ) -> SyncResult:
        """Sync server mods into the mods directory.

        Every mod is closed exactly once, including when the run aborts
        before it is transferred.

        Args:
            mods: Server mods, unique by name
            policy: Sync policy (defaults to no force, no keep-existing)

        Returns:
            SyncResult describing what was done

        Raises:
            NoRemoteArtifactsError: If there are no server mods
            DirectoryError: If a required directory cannot be created or read
            WriteFailedError: If a server mod cannot be written
            BackupFailedError: If a local mod cannot be moved to backup
        """
        policy = policy or SyncPolicy()
        mods = list(mods)
        if not mods:
            raise NoRemoteArtifactsError()

        start_time = time.time()
        logger.info(
            "Syncing %d server mod(s) into %s", len(mods), self.paths.mods_dir
        )

        try:
            self._ensure_dir(self.paths.mods_dir)
            inventory = self._scan_inventory(policy)
        except Exception:
            for mod in mods:
                mod.close()
            raise

        comparator = ModComparator(policy)
        result = SyncResult()

        # Step 1: write phase
        decisions = self.executor.run(
            PHASE_WRITE,
            [
                partial(self._sync_mod, mod, inventory, comparator, policy)
                for mod in mods
            ],
        )
        result.record(decisions)

        # Step 2: back up whatever the server did not claim
        if policy.backs_up_orphans and inventory is not None:
            orphans = inventory.remaining()
            if orphans:
                logger.info("Backing up %d local mod(s)", len(orphans))
                self._ensure_dir(self.paths.backup_dir)
                decisions = self.executor.run(
                    PHASE_BACKUP,
                    [
                        partial(self._backup_orphan, comparator.orphan(name, size))
                        for name, size in sorted(orphans.items())
                    ],
                )
                result.record(decisions)

        logger.info(
            "Sync finished in %.2fs: %d written, %d skipped, %d backed up",
            time.time() - start_time,
            result.total_writes,
            len(result.skipped),
            result.total_backups,
        )
        return result

    def _ensure_dir(self, directory: Path) -> None:
        """Create a directory and its parents if missing.

        Raises:
            DirectoryError: If the directory cannot be created
        """
        try:
            directory.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryError(directory, e) from e

    def _scan_inventory(self, policy: SyncPolicy) -> Optional[LocalInventory]:
        """Snapshot the mods directory, unless local state is irrelevant."""
        if not policy.requires_local_scan:
            logger.debug("Forced sync keeping existing mods, skipping local scan")
            return None
        return LocalInventory(self.scanner.scan_sizes(self.paths.mods_dir))

    def _sync_mod(
        self,
        mod: RemoteMod,
        inventory: Optional[LocalInventory],
        comparator: ModComparator,
        policy: SyncPolicy,
    ) -> SyncDecision:
        """Decide and apply the action for one server mod.

        Runs on a worker thread.
        """
        handed_off = False
        try:
            name = mod.name
            local_size = inventory.get(name) if inventory is not None else None
            decision = comparator.compare(name, mod.size, local_size)
            logger.debug("%s: %s (%s)", name, decision.action.value, decision.reason)

            if decision.action == SyncAction.REPLACE_WITH_BACKUP:
                # The backup directory lives inside the mods directory and may
                # not exist yet on a first run
                self._ensure_dir(self.paths.backup_dir)
                self._backup(name)

            if decision.action.writes:
                dest = self.paths.mods_dir / name
                self.observer.notify(
                    SyncEventInfo(
                        event=SyncEvent.WRITE_STARTED,
                        name=name,
                        size=mod.size,
                        source=mod,
                        dest_path=dest,
                    )
                )
                handed_off = True
                write_mod(mod, dest)
        finally:
            if not handed_off:
                mod.close()

        if policy.backs_up_orphans and inventory is not None:
            inventory.claim(name)
        return decision

    def _backup(self, name: str) -> Path:
        source = self.paths.mods_dir / name
        target = self.paths.backup_dir / name
        self.observer.notify(
            SyncEventInfo(
                event=SyncEvent.BACKUP_STARTED,
                name=name,
                source_path=source,
                dest_path=target,
            )
        )
        return backup_mod(name, self.paths.mods_dir, self.paths.backup_dir)

    def _backup_orphan(self, decision: SyncDecision) -> SyncDecision:
        """Move one orphaned local mod to the backup directory.

        Runs on a worker thread.
        """
        self._backup(decision.name)
        return decision
