# ABOUTME: Classified errors surfaced by the request executor.
# ABOUTME: Provides HTTP status, timeout, and network failure types with their context.

from linkdapi.errors import LinkdAPIError


class HTTPError(LinkdAPIError):
    """Exception raised when the API answers with a non-success status.

    Attributes:
        status_code: HTTP status code of the failing response.
        status_text: Reason phrase of the failing response.
        response_body: Raw response text, if any was returned.
    """

    def __init__(
        self,
        status_code: int,
        status_text: str,
        response_body: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            status_code: HTTP status code of the failing response.
            status_text: Reason phrase of the failing response.
            response_body: Raw response text, if any was returned.
        """
        super().__init__(f"API request failed with status {status_code}: {status_text}")
        self.status_code = status_code
        self.status_text = status_text
        self.response_body = response_body

    @property
    def is_client_error(self) -> bool:
        """Return True for 4xx responses."""
        return 400 <= self.status_code < 500


class RequestTimeoutError(LinkdAPIError):
    """Exception raised when an attempt exceeds the configured timeout."""

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message)


class NetworkError(LinkdAPIError):
    """Exception raised for transport failures and unreadable responses.

    Attributes:
        cause: The underlying exception, if one was captured.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
