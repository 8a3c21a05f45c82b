"""Resolution of the Minecraft install, mods and backup directories."""

import logging
import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModPaths:
    """Directories a sync operates on.

    Computed once at startup and passed to the sync engine explicitly.
    """

    install_dir: Path
    """Minecraft installation directory"""

    mods_dir: Path
    """Directory holding installed mods (install_dir/mods)"""

    backup_dir: Path
    """Directory receiving replaced and orphaned mods (mods_dir/backup)"""

    @classmethod
    def from_install_dir(cls, install_dir: Path) -> "ModPaths":
        """Derive mods and backup directories from an install directory.

        Args:
            install_dir: Minecraft installation directory

        Returns:
            ModPaths instance
        """
        install_dir = Path(install_dir).expanduser()
        mods_dir = install_dir / "mods"
        return cls(
            install_dir=install_dir,
            mods_dir=mods_dir,
            backup_dir=mods_dir / "backup",
        )


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise ConfigurationError(f"Cannot determine home directory: {e}") from e


def default_install_dir(system: Optional[str] = None) -> Path:
    """Return the platform's default Minecraft installation directory.

    Args:
        system: Platform name as reported by platform.system()
            (defaults to the running platform)

    Returns:
        Path to the installation directory

    Raises:
        ConfigurationError: If the platform is unsupported or its user
            directories cannot be determined
    """
    system = system or platform.system()

    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise ConfigurationError("%APPDATA% is not defined")
        return Path(appdata) / ".minecraft"
    if system == "Darwin":
        return _home_dir() / "Library" / "Application Support" / "minecraft"
    if system == "Linux":
        return _home_dir() / ".minecraft"

    raise ConfigurationError(f"{system!r} is unsupported")


def resolve_paths(
    install_dir: Optional[Path] = None, system: Optional[str] = None
) -> ModPaths:
    """Resolve the directories used for syncing.

    Args:
        install_dir: Explicit installation directory (skips platform lookup)
        system: Platform name override, mainly for testing

    Returns:
        ModPaths instance

    Raises:
        ConfigurationError: If no installation directory can be determined
    """
    if install_dir is None:
        install_dir = default_install_dir(system)
    paths = ModPaths.from_install_dir(install_dir)
    logger.debug("Resolved mods directory: %s", paths.mods_dir)
    return paths
