"""Thread-safe snapshot of the local mods directory."""

import threading
from typing import Optional


class LocalInventory:
    """Mapping of local mod names to sizes, shared by transfer workers.

    The inventory is built once per sync before any writes happen. Workers
    remove ("claim") names as the server set accounts for them, so whatever
    remains after the write phase are the orphans. Every access goes through
    a single lock that is never held across I/O.
    """

    def __init__(self, sizes: Optional[dict[str, int]] = None):
        """Initialize local inventory.

        Args:
            sizes: Dictionary mapping mod name to size in bytes
        """
        self._sizes = dict(sizes or {})
        self._lock = threading.Lock()

    def get(self, name: str) -> Optional[int]:
        """Return the recorded size of a local mod, or None if unknown."""
        with self._lock:
            return self._sizes.get(name)

    def claim(self, name: str) -> None:
        """Mark a local mod as accounted for by the server."""
        with self._lock:
            self._sizes.pop(name, None)

    def remaining(self) -> dict[str, int]:
        """Return a copy of the unclaimed entries."""
        with self._lock:
            return dict(self._sizes)
