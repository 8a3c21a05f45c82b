"""Sync engine for modsync - reconcile the mods directory with a server."""

from .comparator import ModComparator, SyncAction, SyncDecision
from .engine import SyncEngine
from .executor import TransferExecutor
from .inventory import LocalInventory
from .operations import backup_mod, write_mod
from .policy import SyncPolicy
from .progress import (
    CallbackObserver,
    NullObserver,
    SyncEvent,
    SyncEventInfo,
    SyncObserver,
)
from .result import SyncResult
from .scanner import LocalMod, ModScanner

__all__ = [
    "SyncEngine",
    "SyncPolicy",
    "SyncResult",
    "TransferExecutor",
    "ModComparator",
    "SyncAction",
    "SyncDecision",
    "LocalInventory",
    "LocalMod",
    "ModScanner",
    "backup_mod",
    "write_mod",
    "SyncEvent",
    "SyncEventInfo",
    "SyncObserver",
    "NullObserver",
    "CallbackObserver",
]
