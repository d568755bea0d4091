"""Asset transports: fetch one JSON document for a path, or fail.

MsgLocalization only depends on the AssetFetcher protocol. Two transports
ship with the package and are selected by ``AssetOptions.load_assets_via``:

    HttpAssetFetcher       - HTTP GET via httpx, decoded as JSON
    FileSystemAssetFetcher - file read in a worker thread, decoded as JSON

Every failure surfaces as AssetFetchError (AssetNotFoundError when the
document does not exist) so the loader can record and log it uniformly.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import httpx

from msglocalization.enums import AssetTransport
from msglocalization.errors import AssetFetchError, AssetNotFoundError

if TYPE_CHECKING:
    from msglocalization.localization.types import JsonValue

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "AssetFetcher",
    # Concrete transports
    "HttpAssetFetcher",
    "FileSystemAssetFetcher",
    # Factory
    "create_fetcher",
]

DEFAULT_HTTP_TIMEOUT: float = 30.0


class AssetFetcher(Protocol):
    """Protocol for fetching a JSON asset document.

    This is a Protocol (structural typing) rather than ABC so any object
    with a matching ``fetch`` coroutine can be injected.

    Example:
        >>> class DictFetcher:
        ...     def __init__(self, documents):
        ...         self.documents = documents
        ...     async def fetch(self, path):
        ...         try:
        ...             return self.documents[path]
        ...         except KeyError:
        ...             raise AssetNotFoundError("missing", path=path) from None
    """

    async def fetch(self, path: str) -> JsonValue:
        """Fetch and decode the document at ``path``.

        Raises:
            AssetNotFoundError: If the document does not exist
            AssetFetchError: On any other transport or decoding failure
        """


class HttpAssetFetcher:
    """Fetch documents with HTTP GET.

    Uses the injected ``httpx.AsyncClient`` when given (connection pooling,
    base_url, auth and transports are then the caller's business);
    otherwise a short-lived client is opened per request.

    Attributes:
        timeout: Per-request timeout in seconds for self-managed clients.
    """

    __slots__ = ("_client", "timeout")

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ) -> None:
        """Initialize the HTTP transport.

        Args:
            client: Optional shared client
            timeout: Timeout for self-managed clients (ignored with ``client``)
        """
        self._client = client
        self.timeout = timeout

    async def fetch(self, path: str) -> JsonValue:
        """GET ``path`` and decode the JSON body.

        Raises:
            AssetNotFoundError: On HTTP 404
            AssetFetchError: On other HTTP errors, network errors, or invalid JSON
        """
        try:
            if self._client is not None:
                response = await self._client.get(path)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(path)
        except httpx.HTTPError as e:
            msg = f"Failed to load resource at {path}: {e}"
            raise AssetFetchError(msg, path=path) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            msg = f"Resource not found at {path} (HTTP 404)"
            raise AssetNotFoundError(msg, path=path)
        if response.is_error:
            msg = f"Failed to load resource at {path} (HTTP {response.status_code})"
            raise AssetFetchError(msg, path=path)

        try:
            return response.json()
        except (ValueError, RecursionError) as e:
            msg = f"Invalid JSON in resource at {path}: {e}"
            raise AssetFetchError(msg, path=path) from e


class FileSystemAssetFetcher:
    """Fetch documents from the local filesystem.

    The blocking read runs in a worker thread (``asyncio.to_thread``) so the
    event loop keeps serving other tasks while files load.
    """

    __slots__ = ("encoding",)

    def __init__(self, *, encoding: str = "utf-8") -> None:
        """Initialize the filesystem transport.

        Args:
            encoding: Text encoding of the documents
        """
        self.encoding = encoding

    async def fetch(self, path: str) -> JsonValue:
        """Read and decode the file at ``path``.

        Raises:
            AssetNotFoundError: If the file does not exist
            AssetFetchError: If the file cannot be read or is not valid JSON
        """
        try:
            text = await asyncio.to_thread(Path(path).read_text, encoding=self.encoding)
        except FileNotFoundError as e:
            msg = f"Resource not found at {path}"
            raise AssetNotFoundError(msg, path=path) from e
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Failed to load resource at {path}: {e}"
            raise AssetFetchError(msg, path=path) from e

        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            msg = f"Invalid JSON in resource at {path}: {e}"
            raise AssetFetchError(msg, path=path) from e


def create_fetcher(transport: AssetTransport | str) -> AssetFetcher:
    """Build the standard fetcher for a transport selector.

    Raises:
        ValueError: If the selector is not a known AssetTransport
    """
    match AssetTransport(transport):
        case AssetTransport.FILE_SYSTEM:
            return FileSystemAssetFetcher()
        case AssetTransport.HTTP:
            return HttpAssetFetcher()
