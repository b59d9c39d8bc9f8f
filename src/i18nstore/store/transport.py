"""Remote JSON retrieval for ResourceStore.load().

Provides the protocol the store consumes ("given a URL, asynchronously yield
a parsed JSON value, or fail") and an httpx-based implementation.

Components:
    JSONFetcher - Protocol for fetching parsed JSON documents (structural typing)
    HttpJSONFetcher - httpx.AsyncClient implementation

Error mapping (HttpJSONFetcher):
    httpx.HTTPStatusError -> TransportError(status_code=<status>)
    other httpx.HTTPError  -> TransportError(status_code=None)
    invalid JSON body      -> ParseError

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

import httpx

from i18nstore.config import StoreConfig
from i18nstore.errors import ParseError, TransportError

if TYPE_CHECKING:
    from i18nstore.types import ResourceValue

__all__ = [
    "HttpJSONFetcher",
    "JSONFetcher",
]

logger = logging.getLogger(__name__)


class JSONFetcher(Protocol):
    """Protocol for retrieving remote JSON documents.

    Implementations must raise TransportError for network failures and
    non-success HTTP statuses, and ParseError for bodies that are not valid
    JSON, so callers of ResourceStore.load() can tell the failures apart.

    This is a Protocol (structural typing) rather than ABC so tests and
    applications can supply any object with a matching coroutine.

    Example:
        >>> class StaticFetcher:
        ...     def __init__(self, documents):
        ...         self.documents = documents
        ...     async def fetch_json(self, url: str):
        ...         return self.documents[url]
        ...
        >>> store = ResourceStore(fetcher=StaticFetcher({"/fr.json": {"ui": {}}}))
    """

    async def fetch_json(self, url: str) -> ResourceValue:
        """Fetch url and return the decoded JSON document.

        Args:
            url: Location of the document

        Returns:
            Parsed JSON value

        Raises:
            TransportError: Network failure or HTTP error status
            ParseError: Body is not valid JSON
        """
        ...


class HttpJSONFetcher:
    """JSONFetcher backed by httpx.

    Opens a short-lived AsyncClient per request, so the fetcher holds no
    connections between loads and needs no teardown.

    Example:
        >>> fetcher = HttpJSONFetcher(StoreConfig(timeout=3.0))
        >>> data = await fetcher.fetch_json("https://cdn.example.com/i18n/lv.json")
    """

    __slots__ = ("_config", "_transport")

    def __init__(
        self,
        config: StoreConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Timeout, header and redirect settings (default: StoreConfig())
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests
        """
        self._config = config if config is not None else StoreConfig()
        self._transport = transport

    def __repr__(self) -> str:
        return f"HttpJSONFetcher(timeout={self._config.timeout!r})"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._config.timeout,
            headers=dict(self._config.headers),
            follow_redirects=self._config.follow_redirects,
            transport=self._transport,
        )

    async def fetch_json(self, url: str) -> Any:
        """Fetch url and decode the body as JSON.

        Raises:
            TransportError: Network failure or HTTP error status
            ParseError: Body is not valid JSON
        """
        async with self._client() as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                msg = f"HTTP {status} while fetching '{url}'"
                raise TransportError(msg, url=url, status_code=status) from e
            except httpx.HTTPError as e:
                msg = f"Request for '{url}' failed: {e}"
                raise TransportError(msg, url=url) from e

        logger.debug("Fetched %s (%d bytes)", url, len(response.content))

        try:
            return response.json()
        except ValueError as e:
            msg = f"Response from '{url}' is not valid JSON: {e}"
            raise ParseError(msg, url=url) from e
