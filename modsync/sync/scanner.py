"""Directory scanning for the local mods directory."""

import logging
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import DirectoryError
from ..utils import MOD_SUFFIX, is_mod_name

logger = logging.getLogger(__name__)


@dataclass
class LocalMod:
    """Represents a local mod with metadata."""

    path: Path
    """Absolute path to the mod"""

    size: int
    """File size in bytes"""

    @property
    def name(self) -> str:
        """File name of the mod."""
        return self.path.name


class ModScanner:
    """Lists the mods in a directory.

    Only regular files directly inside the directory whose names carry the
    mod suffix are returned. Subdirectories (including the backup
    directory) are never descended into.

    Examples:
        >>> scanner = ModScanner()
        >>> sizes = scanner.scan_sizes(Path("~/.minecraft/mods").expanduser())
    """

    def __init__(self, suffix: str = MOD_SUFFIX):
        """Initialize mod scanner.

        Args:
            suffix: File suffix that identifies mods
        """
        self.suffix = suffix

    def scan(self, directory: Path) -> list[LocalMod]:
        """Scan a directory for mods.

        Args:
            directory: Directory to scan

        Returns:
            List of LocalMod objects, sorted by name

        Raises:
            DirectoryError: If the directory cannot be listed
        """
        mods: list[LocalMod] = []
        try:
            for item in sorted(directory.iterdir()):
                if not is_mod_name(item.name, self.suffix):
                    continue
                if not item.is_file():
                    continue
                mods.append(LocalMod(path=item, size=item.stat().st_size))
        except OSError as e:
            raise DirectoryError(directory, e) from e

        logger.debug("Found %d local mod(s) in %s", len(mods), directory)
        return mods

    def scan_sizes(self, directory: Path) -> dict[str, int]:
        """Scan a directory into a mapping of mod name to size.

        Args:
            directory: Directory to scan

        Returns:
            Dictionary mapping file name to size in bytes
        """
        return {mod.name: mod.size for mod in self.scan(directory)}
