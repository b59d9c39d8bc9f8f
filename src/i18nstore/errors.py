"""Exception hierarchy for i18nstore.

Only remote loading and use-after-destroy raise. Lookups and registrations
with an empty namespace are soft failures and never raise.

Hierarchy:
    ResourceStoreError (base)
    ├─ TransportError (network failure or HTTP error status)
    ├─ ParseError (body is not a JSON object)
    └─ StoreDestroyedError (operation on a destroyed store)

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ParseError",
    "ResourceStoreError",
    "StoreDestroyedError",
    "TransportError",
]


class ResourceStoreError(Exception):
    """Base exception for all i18nstore errors."""


class TransportError(ResourceStoreError):
    """Remote bundle could not be retrieved.

    Raised for network-level failures (connection refused, DNS, timeout) and
    for responses with a non-success HTTP status. The underlying httpx
    exception is chained as __cause__.

    Attributes:
        url: Location that was requested
        status_code: HTTP status for error responses, None for network failures
    """

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        """Initialize TransportError.

        Args:
            message: Human-readable error description
            url: Location that was requested
            status_code: HTTP status, if a response was received
        """
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    @property
    def is_http_error(self) -> bool:
        """Check if a response was received with an error status."""
        return self.status_code is not None


class ParseError(ResourceStoreError):
    """Remote bundle body is not usable JSON.

    Raised when the body cannot be decoded as JSON, or when the document
    (after any on_load transform) is not a JSON object.

    Attributes:
        url: Location the body came from
    """

    def __init__(self, message: str, *, url: str) -> None:
        """Initialize ParseError.

        Args:
            message: Human-readable error description
            url: Location the body came from
        """
        super().__init__(message)
        self.url = url


class StoreDestroyedError(ResourceStoreError):
    """Operation attempted on a store after destroy()."""
