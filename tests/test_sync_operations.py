"""Tests for the write and backup primitives."""

import pytest

from modsync.exceptions import BackupFailedError, RemoteNetworkError, WriteFailedError
from modsync.sync.operations import backup_mod, write_mod

from .conftest import FakeMod


class TestWriteMod:
    """Tests for write_mod."""

    def test_writes_contents_and_closes(self, temp_dir):
        mod = FakeMod("a.jar", b"hello")
        dest = temp_dir / "a.jar"

        written = write_mod(mod, dest)

        assert written == 5
        assert dest.read_bytes() == b"hello"
        assert mod.close_count == 1

    def test_truncates_existing_file(self, temp_dir):
        dest = temp_dir / "a.jar"
        dest.write_bytes(b"a much longer previous version")

        write_mod(FakeMod("a.jar", b"new"), dest)

        assert dest.read_bytes() == b"new"

    def test_stream_error_raises_write_failed(self, temp_dir):
        """Server errors while streaming are reported as WriteFailedError."""
        mod = FakeMod("a.jar", error=RemoteNetworkError("connection reset"))
        dest = temp_dir / "a.jar"

        with pytest.raises(WriteFailedError) as exc_info:
            write_mod(mod, dest)

        assert exc_info.value.path == dest
        assert isinstance(exc_info.value.cause, RemoteNetworkError)
        assert mod.close_count == 1

    def test_os_error_raises_write_failed(self, temp_dir):
        mod = FakeMod("a.jar", error=OSError("disk full"))

        with pytest.raises(WriteFailedError, match="disk full"):
            write_mod(mod, temp_dir / "a.jar")

        assert mod.close_count == 1

    def test_unwritable_destination_closes_mod(self, temp_dir):
        """The mod is closed even if the destination cannot be created."""
        mod = FakeMod("a.jar", b"data")
        dest = temp_dir / "missing" / "a.jar"

        with pytest.raises(WriteFailedError):
            write_mod(mod, dest)

        assert mod.write_count == 0
        assert mod.close_count == 1


class TestBackupMod:
    """Tests for backup_mod."""

    @pytest.fixture
    def dirs(self, temp_dir):
        mods_dir = temp_dir / "mods"
        backup_dir = mods_dir / "backup"
        backup_dir.mkdir(parents=True)
        return mods_dir, backup_dir

    def test_moves_mod_unchanged(self, dirs):
        mods_dir, backup_dir = dirs
        (mods_dir / "b.jar").write_bytes(b"old contents")

        target = backup_mod("b.jar", mods_dir, backup_dir)

        assert target == backup_dir / "b.jar"
        assert target.read_bytes() == b"old contents"
        assert not (mods_dir / "b.jar").exists()

    def test_replaces_previous_backup(self, dirs):
        mods_dir, backup_dir = dirs
        (backup_dir / "b.jar").write_bytes(b"older")
        (mods_dir / "b.jar").write_bytes(b"newer")

        backup_mod("b.jar", mods_dir, backup_dir)

        assert (backup_dir / "b.jar").read_bytes() == b"newer"

    def test_missing_source_raises(self, dirs):
        mods_dir, backup_dir = dirs

        with pytest.raises(BackupFailedError) as exc_info:
            backup_mod("gone.jar", mods_dir, backup_dir)

        assert exc_info.value.name == "gone.jar"
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_missing_backup_dir_raises(self, temp_dir):
        """There is no fallback when the rename cannot happen."""
        mods_dir = temp_dir / "mods"
        mods_dir.mkdir()
        (mods_dir / "b.jar").write_bytes(b"x")

        with pytest.raises(BackupFailedError):
            backup_mod("b.jar", mods_dir, mods_dir / "backup")

        assert (mods_dir / "b.jar").exists()
