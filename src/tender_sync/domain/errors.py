"""Domain error classes.

Protocol-agnostic errors shared by the search stream, the favorites stream and
the reference tender service. Transport failures are translated into
``FetchError`` subclasses by the HTTP adapters; the service side translates
the remaining errors to HTTP responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus free-form context that is
    forwarded into logs and structured error payloads.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for error (e.g., status codes, identifiers)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Caller contract violation.

    Filter criteria are never validated locally (the server is the judge of
    malformed values); only paging parameters and pagination window sizes are.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "page_no", "message": "Must be >= 1"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Removing a favorite that is not in the user's favorite set

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Favorite", "Tender")
            identifier: Resource identifier (e.g., management number)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class FetchError(DomainError):
    """A remote call did not produce a usable response.

    Base class for every failure the streams recover from. Timeouts raised by
    the transport surface as ``NetworkError``.
    """

    error_code: str = "FETCH_ERROR"


class NetworkError(FetchError):
    """Transport failure before any response was received."""

    error_code: str = "NETWORK_ERROR"


class HttpError(FetchError):
    """A response arrived with a non-success status.

    Attributes:
        status_code: HTTP status returned by the server
        server_message: Optional message extracted from the response body
    """

    error_code: str = "HTTP_ERROR"

    def __init__(
        self,
        status_code: int,
        server_message: str | None = None,
        **context: Any,
    ) -> None:
        self.status_code = status_code
        self.server_message = server_message

        message = f"HTTP error! status: {status_code}"
        if server_message:
            message = f"{message} - {server_message}"

        super().__init__(
            message,
            status_code=status_code,
            server_message=server_message,
            **context,
        )
