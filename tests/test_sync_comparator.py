"""Tests for the ModComparator class."""

from modsync.sync.comparator import ModComparator, SyncAction
from modsync.sync.policy import SyncPolicy


class TestCompare:
    """Tests for deciding what happens to a server mod."""

    def test_missing_local_mod_is_written(self):
        """A server mod without a local counterpart is written."""
        comparator = ModComparator(SyncPolicy())

        decision = comparator.compare("a.jar", 100, None)

        assert decision.action == SyncAction.WRITE_NEW
        assert decision.reason == "New server mod"
        assert decision.name == "a.jar"
        assert decision.remote_size == 100

    def test_same_size_is_skipped(self):
        """Equal sizes are treated as identical contents."""
        comparator = ModComparator(SyncPolicy())

        decision = comparator.compare("a.jar", 100, 100)

        assert decision.action == SyncAction.SKIP
        assert decision.local_size == 100

    def test_different_size_is_replaced(self):
        """A size mismatch replaces the local mod after backing it up."""
        comparator = ModComparator(SyncPolicy())

        decision = comparator.compare("a.jar", 100, 99)

        assert decision.action == SyncAction.REPLACE_WITH_BACKUP
        assert "99 vs 100" in decision.reason

    def test_force_overwrites_identical_mod(self):
        """Forced syncs overwrite without comparing sizes."""
        comparator = ModComparator(SyncPolicy(force=True))

        assert comparator.compare("a.jar", 100, 100).action == SyncAction.OVERWRITE
        assert comparator.compare("a.jar", 100, 5).action == SyncAction.OVERWRITE
        assert comparator.compare("a.jar", 100, None).action == SyncAction.OVERWRITE

    def test_keep_existing_does_not_change_comparison(self):
        """keep_existing only affects orphans."""
        comparator = ModComparator(SyncPolicy(keep_existing=True))

        decision = comparator.compare("a.jar", 100, 50)

        assert decision.action == SyncAction.REPLACE_WITH_BACKUP


class TestOrphan:
    """Tests for local mods that the server does not have."""

    def test_orphan_is_backed_up(self):
        """Orphans are backed up by default."""
        comparator = ModComparator(SyncPolicy())

        decision = comparator.orphan("b.jar", 50)

        assert decision.action == SyncAction.BACKUP_ORPHAN
        assert decision.local_size == 50
        assert decision.remote_size is None


class TestSyncAction:
    """Tests for SyncAction helpers."""

    def test_writes(self):
        assert SyncAction.WRITE_NEW.writes
        assert SyncAction.REPLACE_WITH_BACKUP.writes
        assert SyncAction.OVERWRITE.writes
        assert not SyncAction.SKIP.writes
        assert not SyncAction.BACKUP_ORPHAN.writes


class TestSyncPolicy:
    """Tests for SyncPolicy flags."""

    def test_defaults(self):
        policy = SyncPolicy()
        assert policy.requires_local_scan
        assert policy.backs_up_orphans

    def test_force_and_keep_existing_skip_scan(self):
        """Local state is irrelevant when both flags are set."""
        assert not SyncPolicy(force=True, keep_existing=True).requires_local_scan
        assert SyncPolicy(force=True).requires_local_scan
        assert SyncPolicy(keep_existing=True).requires_local_scan

    def test_keep_existing_disables_orphan_backup(self):
        assert not SyncPolicy(keep_existing=True).backs_up_orphans
