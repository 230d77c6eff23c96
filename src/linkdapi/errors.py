# ABOUTME: Base exception classes for LinkdAPI client errors.
# ABOUTME: Provides the common root for runtime failures and the configuration error.


class LinkdAPIError(Exception):
    """Base exception for all LinkdAPI runtime errors.

    Every classified failure surfaced by a client call (HTTP, timeout or
    network) inherits from this class so callers can catch them together.
    """

    pass


class ConfigurationError(LinkdAPIError):
    """Exception raised when a client is constructed with invalid settings."""

    pass


class MissingParameterError(ValueError):
    """Exception raised when a call omits every option of a required parameter group.

    This signals a programming error at the call site and is raised before
    any request is made. It is a ValueError, not a LinkdAPIError.
    """

    def __init__(self, *names: str) -> None:
        """Initialize the exception.

        Args:
            names: The parameter names of which at least one was required.
        """
        self.names = names
        super().__init__(f"Either {' or '.join(names)} must be provided")
