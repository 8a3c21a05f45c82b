"""Write and backup primitives applied by the sync engine."""

import logging
from pathlib import Path

from ..exceptions import BackupFailedError, RemoteError, WriteFailedError
from ..remote import RemoteMod

logger = logging.getLogger(__name__)


def write_mod(mod: RemoteMod, dest: Path) -> int:
    """Write a server mod to a local file.

    The destination is created or truncated. The mod is closed exactly once,
    whether or not the write succeeds.

    Args:
        mod: Server mod to write
        dest: Destination file path

    Returns:
        Number of bytes written

    Raises:
        WriteFailedError: If the file cannot be written or the server fails
            while streaming
    """
    logger.debug("Writing %s ...", dest)
    try:
        try:
            with open(dest, "wb") as f:
                return mod.write_to(f)
        finally:
            mod.close()
    except (OSError, RemoteError) as e:
        raise WriteFailedError(dest, e) from e


def backup_mod(name: str, mods_dir: Path, backup_dir: Path) -> Path:
    """Move a local mod into the backup directory.

    The move is a single rename, atomic on one filesystem. A previous
    backup with the same name is replaced. There is no copy fallback, so a
    backup directory on another device fails.

    Args:
        name: File name of the mod
        mods_dir: Directory holding the mod
        backup_dir: Directory receiving the mod

    Returns:
        Path of the backed up mod

    Raises:
        BackupFailedError: If the rename fails
    """
    source = mods_dir / name
    target = backup_dir / name
    logger.debug("Moving %s to %s ...", source, backup_dir)
    try:
        source.replace(target)
    except OSError as e:
        raise BackupFailedError(name, e) from e
    return target
