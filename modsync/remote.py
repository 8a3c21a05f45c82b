"""Mod servers that supply the authoritative set of mods.

A server is anything with a ``mods()`` method returning remote mods. Each
remote mod knows its name and size, can stream its contents into a binary
file object and must be closed exactly once after use.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO, NoReturn, Protocol, runtime_checkable
from urllib.parse import quote, urljoin

import httpx

from .exceptions import (
    RemoteError,
    RemoteInvalidResponseError,
    RemoteNetworkError,
    RemoteNotFoundError,
)
from .utils import DEFAULT_CHUNK_SIZE, MOD_SUFFIX, is_mod_name

logger = logging.getLogger(__name__)


@runtime_checkable
class RemoteMod(Protocol):
    """A server mod that can be written to a file and closed."""

    @property
    def name(self) -> str: ...

    @property
    def size(self) -> int: ...

    def write_to(self, sink: BinaryIO) -> int: ...

    def close(self) -> None: ...


class Server(Protocol):
    """A mod server."""

    def mods(self) -> list[RemoteMod]: ...


# =========================
# Directory server
# =========================


class FileMod:
    """A mod backed by a file on a local or mounted filesystem."""

    def __init__(self, path: Path, size: int | None = None):
        self.path = path
        self._size = size if size is not None else path.stat().st_size
        self._file: BinaryIO | None = None
        self.closed = False

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def size(self) -> int:
        return self._size

    def write_to(self, sink: BinaryIO) -> int:
        """Copy the file's contents into sink.

        Returns:
            Number of bytes written
        """
        if self.closed:
            raise ValueError(f"{self.name} is closed")
        self._file = open(self.path, "rb")
        written = 0
        while True:
            chunk = self._file.read(DEFAULT_CHUNK_SIZE)
            if not chunk:
                break
            sink.write(chunk)
            written += len(chunk)
        return written

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self.closed = True

    def __repr__(self) -> str:
        return f"FileMod({str(self.path)!r}, size={self._size})"


class DirectoryServer:
    """Serves the mods found in a directory.

    Useful for syncing from a shared network folder or a modpack that has
    been unpacked locally.
    """

    def __init__(self, path: Path, suffix: str = MOD_SUFFIX):
        """Initialize directory server.

        Args:
            path: Directory containing the server's mods
            suffix: File suffix that identifies mods
        """
        self.path = Path(path)
        self.suffix = suffix

    def mods(self) -> list[RemoteMod]:
        """List the mods in the directory.

        Returns:
            List of FileMod objects, sorted by name

        Raises:
            RemoteError: If the directory cannot be read
        """
        mods: list[RemoteMod] = []
        try:
            for item in sorted(self.path.iterdir()):
                if item.is_file() and is_mod_name(item.name, self.suffix):
                    mods.append(FileMod(item, item.stat().st_size))
        except FileNotFoundError as e:
            raise RemoteNotFoundError(
                f"Server directory does not exist: {self.path}"
            ) from e
        except OSError as e:
            raise RemoteError(f"Cannot read server directory {self.path}: {e}") from e

        logger.debug("Found %d mod(s) in %s", len(mods), self.path)
        return mods


# =========================
# HTTP server
# =========================


def _raise_for_http_error(e: httpx.HTTPStatusError, what: str) -> NoReturn:
    status_code = e.response.status_code
    if status_code == 404:
        raise RemoteNotFoundError(f"{what} not found") from e
    raise RemoteError(f"{what} request failed with status {status_code}") from e


class HTTPMod:
    """A mod streamed from an HTTP mod server."""

    def __init__(self, client: httpx.Client, name: str, size: int, url: str):
        self._client = client
        self._name = name
        self._size = size
        self.url = url
        self._response: httpx.Response | None = None
        self.closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return self._size

    def write_to(self, sink: BinaryIO) -> int:
        """Download the mod into sink.

        Returns:
            Number of bytes written

        Raises:
            RemoteError: If the download fails
        """
        if self.closed:
            raise ValueError(f"{self.name} is closed")

        written = 0
        try:
            request = self._client.build_request("GET", self.url)
            self._response = self._client.send(request, stream=True)
            self._response.raise_for_status()
            for chunk in self._response.iter_bytes(chunk_size=DEFAULT_CHUNK_SIZE):
                if chunk:
                    sink.write(chunk)
                    written += len(chunk)
        except httpx.HTTPStatusError as e:
            _raise_for_http_error(e, f"Mod {self.name!r}")
        except httpx.RequestError as e:
            raise RemoteNetworkError(
                f"Network error while downloading {self.name!r}: {e}"
            ) from e
        return written

    def close(self) -> None:
        if self._response is not None:
            self._response.close()
            self._response = None
        self.closed = True

    def __repr__(self) -> str:
        return f"HTTPMod({self._name!r}, size={self._size}, url={self.url!r})"


class HTTPServer:
    """Mod server reached over HTTP.

    The server publishes a manifest at ``<url>/mods.json``. The manifest is
    either a list of entries or an object with a ``mods`` list; each entry
    has a ``name`` and a ``size`` in bytes and an optional ``url``. Entries
    without a ``url`` are downloaded from ``<url>/mods/<name>``.

    Examples:
        >>> server = HTTPServer("https://mods.example.com/pack")
        >>> for mod in server.mods():
        ...     print(mod.name, mod.size)
    """

    manifest_name = "mods.json"

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        """Initialize HTTP server.

        Args:
            url: Base URL of the mod server
            timeout: Connect and read timeout in seconds (default: 30.0)
            client: Optional preconfigured httpx client
        """
        self.url = url.rstrip("/") + "/"
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.Client:
        """Get or create the httpx client.

        Every mod is downloaded on its own worker and holds its connection
        until closed, so the pool is unbounded and never waits for a slot.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.timeout, pool=None),
                limits=httpx.Limits(
                    max_connections=None, max_keepalive_connections=20
                ),
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close the client and release connections."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> HTTPServer:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _fetch_manifest(self) -> Any:
        url = urljoin(self.url, self.manifest_name)
        client = self._get_client()
        try:
            response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            _raise_for_http_error(e, "Mod manifest")
        except httpx.RequestError as e:
            raise RemoteNetworkError(f"Network error: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise RemoteInvalidResponseError(
                "Invalid JSON in mod manifest"
            ) from e

    def _parse_entry(self, entry: Any) -> HTTPMod:
        if not isinstance(entry, dict):
            raise RemoteInvalidResponseError(f"Invalid manifest entry: {entry!r}")

        name = entry.get("name")
        size = entry.get("size")
        if not isinstance(name, str) or not is_mod_name(name):
            raise RemoteInvalidResponseError(f"Invalid mod name in manifest: {name!r}")
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise RemoteInvalidResponseError(
                f"Invalid size for mod {name!r}: {size!r}"
            )

        url = entry.get("url")
        if url:
            url = urljoin(self.url, str(url))
        else:
            url = urljoin(self.url, f"mods/{quote(name)}")
        return HTTPMod(self._get_client(), name, size, url)

    def mods(self) -> list[RemoteMod]:
        """Fetch the manifest and return the server's mods.

        Returns:
            List of HTTPMod objects

        Raises:
            RemoteError: If the manifest cannot be fetched or parsed
        """
        data = self._fetch_manifest()
        if isinstance(data, dict):
            data = data.get("mods")
        if not isinstance(data, list):
            raise RemoteInvalidResponseError("Mod manifest must contain a list of mods")

        mods: list[RemoteMod] = [self._parse_entry(entry) for entry in data]

        names = [mod.name for mod in mods]
        if len(set(names)) != len(names):
            raise RemoteInvalidResponseError("Mod manifest contains duplicate names")

        logger.debug("Server %s lists %d mod(s)", self.url, len(mods))
        return mods
