"""Error taxonomy for catalog lookups.

Remote failures are never raised past the source boundary. They travel
inside a ``Failure`` result and reach the caller unchanged, so the same
instance that the source produced is the one the HTTP layer inspects.

Store outages are raised by the store as ``StoreError`` and turned into a
``Failure`` by the service.
"""


class CatalogError(Exception):
    """Base class for every catalog lookup failure.

    Attributes:
        message: Human-readable cause of the failure
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(CatalogError):
    """A page or character id outside the valid range (must be >= 1)."""


class TransportError(CatalogError):
    """Network or connectivity failure, including timeouts."""


class DecodeError(CatalogError):
    """Response body absent, not JSON, or not matching the wire schema."""


class HttpStatusError(CatalogError):
    """Non-2xx HTTP response.

    Attributes:
        status_code: The HTTP status returned by the remote API
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code


class NotFoundError(HttpStatusError):
    """The remote API answered 404 for the requested page or character."""

    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(404, message)


class StoreError(CatalogError):
    """The local character store could not be read or written."""
