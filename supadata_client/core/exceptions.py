"""Custom exceptions for the Supadata client library."""

from enum import Enum


class ErrorIdentifier(str, Enum):
    """Error codes returned by the API in the ``error`` field."""

    INVALID_REQUEST = "invalid-request"
    INTERNAL_ERROR = "internal-error"
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    UPGRADE_REQUIRED = "upgrade-required"
    TRANSCRIPT_UNAVAILABLE = "transcript-unavailable"
    NOT_FOUND = "not-found"
    LIMIT_EXCEEDED = "limit-exceeded"


class SupadataError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RequestBuildError(SupadataError, ValueError):
    """Raised when a request cannot be built locally (no network call is made)."""

    pass


class APIError(SupadataError):
    """Raised when the API answers with an error status and a structured body.

    Args:
        identifier: The ``error`` code from the body. Unknown codes are kept as
            plain strings.
        message: Human-readable message from the body.
        details: Optional details string.
        documentation_url: Optional link to the relevant documentation.
        status_code: HTTP status code of the response.
    """

    def __init__(
        self,
        identifier: "ErrorIdentifier | str",
        message: str,
        details: str | None = None,
        documentation_url: str | None = None,
        status_code: int | None = None,
    ):
        self.identifier = identifier
        self.details = details
        self.documentation_url = documentation_url
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        identifier = self.identifier.value if isinstance(self.identifier, ErrorIdentifier) else self.identifier
        return f"{identifier}: {self.message}"


class HTTPStatusError(SupadataError):
    """Raised when the API answers with an error status and an unreadable body."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"request failed with status {status_code}")


class DecodeError(SupadataError, ValueError):
    """Raised when a successful response does not match the expected shape."""

    pass
