"""Tests for domain error classes."""

from tender_sync.domain.errors import (
    DomainError,
    FetchError,
    HttpError,
    NetworkError,
    NotFoundError,
    PagingValidationError,
    ValidationError,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() returns structured error format."""
        error = DomainError("Test error", field="test", value=123)

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "test",
            "value": 123,
        }

    def test_str_representation(self) -> None:
        """DomainError string representation is the message."""
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    """Tests for ValidationError and PagingValidationError."""

    def test_creates_simple_validation_error(self) -> None:
        error = ValidationError("Invalid input")

        assert error.message == "Invalid input"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_field_errors_default_message(self) -> None:
        error = ValidationError(errors=[{"field": "pbctBegnDtm", "message": "Must be YYYYMMDD"}])

        assert error.message == "Validation failed"
        assert error.to_dict()["errors"] == [
            {"field": "pbctBegnDtm", "message": "Must be YYYYMMDD"}
        ]

    def test_paging_validation_error_is_validation_error(self) -> None:
        error = PagingValidationError("page_no must be >= 1", page_no=0)

        assert isinstance(error, ValidationError)
        assert error.error_code == "VALIDATION_ERROR"
        assert error.context == {"page_no": 0}


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError("Favorite", "2024-0000-000001")

        assert error.message == "Favorite with identifier '2024-0000-000001' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "Favorite", "identifier": "2024-0000-000001"}

    def test_message_without_identifier(self) -> None:
        assert NotFoundError("Tender").message == "Tender not found"


class TestFetchErrors:
    def test_network_error_is_fetch_error(self) -> None:
        error = NetworkError("Request timed out: GET /api/tenders")

        assert isinstance(error, FetchError)
        assert error.error_code == "NETWORK_ERROR"

    def test_http_error_carries_status_and_server_message(self) -> None:
        error = HttpError(500, "Onbid upstream unavailable", url="/api/tenders")

        assert isinstance(error, FetchError)
        assert error.status_code == 500
        assert error.server_message == "Onbid upstream unavailable"
        assert error.message == "HTTP error! status: 500 - Onbid upstream unavailable"
        assert error.to_dict() == {
            "message": "HTTP error! status: 500 - Onbid upstream unavailable",
            "code": "HTTP_ERROR",
            "status_code": 500,
            "server_message": "Onbid upstream unavailable",
            "url": "/api/tenders",
        }

    def test_http_error_without_server_message(self) -> None:
        error = HttpError(404)

        assert error.message == "HTTP error! status: 404"
        assert error.server_message is None
