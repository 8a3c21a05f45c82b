"""modsync - keep a Minecraft mods directory in sync with a mod server."""

from .exceptions import (
    BackupFailedError,
    ConfigurationError,
    DirectoryError,
    ModSyncError,
    NoRemoteArtifactsError,
    RemoteError,
    RemoteInvalidResponseError,
    RemoteNetworkError,
    RemoteNotFoundError,
    WriteFailedError,
)
from .paths import ModPaths, resolve_paths
from .remote import DirectoryServer, HTTPServer, RemoteMod, Server
from .sync import SyncEngine, SyncPolicy, SyncResult

__version__ = "0.1.0"

__all__ = [
    "SyncEngine",
    "SyncPolicy",
    "SyncResult",
    "ModPaths",
    "resolve_paths",
    "RemoteMod",
    "Server",
    "DirectoryServer",
    "HTTPServer",
    "ModSyncError",
    "ConfigurationError",
    "NoRemoteArtifactsError",
    "DirectoryError",
    "WriteFailedError",
    "BackupFailedError",
    "RemoteError",
    "RemoteNetworkError",
    "RemoteNotFoundError",
    "RemoteInvalidResponseError",
]
