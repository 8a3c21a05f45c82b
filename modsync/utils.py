"""Utility functions and constants for modsync."""

# =============================================================================
# Constants for file operations
# =============================================================================

# Only files with this suffix are treated as mods
MOD_SUFFIX: str = ".jar"

# Permissions for directories created by a sync
DIR_MODE: int = 0o755

# Buffer size used when streaming mod contents
DEFAULT_CHUNK_SIZE: int = 64 * 1024

# Phase names reported to progress observers
PHASE_WRITE: str = "write"
PHASE_BACKUP: str = "backup"


# =============================================================================
# Name utilities
# =============================================================================


def is_mod_name(name: str, suffix: str = MOD_SUFFIX) -> bool:
    """Check whether a file name looks like a mod.

    Args:
        name: Bare file name (no directory components)
        suffix: Required file suffix

    Returns:
        True if the name ends with the suffix and is a plain file name
    """
    if not name or name in (".", ".."):
        return False
    if "/" in name or "\\" in name:
        return False
    return name.endswith(suffix)


# =============================================================================
# Size formatting utilities
# =============================================================================


def format_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable size string (e.g., "1.5 MB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / 1024 / 1024:.1f} MB"
    else:
        return f"{size_bytes / 1024 / 1024 / 1024:.1f} GB"
