"""Exceptions raised by modsync."""

from pathlib import Path
from typing import Optional, Union


class ModSyncError(Exception):
    """Base exception for all modsync errors."""


class ConfigurationError(ModSyncError):
    """Raised when paths or configuration cannot be resolved."""


class NoRemoteArtifactsError(ModSyncError):
    """Raised when a sync is requested against an empty set of server mods."""

    def __init__(self, message: str = "no server mods to sync"):
        super().__init__(message)


class DirectoryError(ModSyncError):
    """Raised when a required directory cannot be listed or created."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        message = f"Directory error for {self.path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class WriteFailedError(ModSyncError):
    """Raised when a server mod could not be written to its destination."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause}")


class BackupFailedError(ModSyncError):
    """Raised when a local mod could not be moved into the backup directory."""

    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to back up {name!r}: {cause}")


class RemoteError(ModSyncError):
    """Base exception for errors reported by a mod server."""


class RemoteNetworkError(RemoteError):
    """Raised when the mod server cannot be reached."""


class RemoteNotFoundError(RemoteError):
    """Raised when the mod server does not have the requested resource."""


class RemoteInvalidResponseError(RemoteError):
    """Raised when the mod server returns a malformed response."""
