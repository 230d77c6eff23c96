# ABOUTME: LinkdAPI client composing every endpoint group over one request executor.
# ABOUTME: Validates configuration up front and manages the lifetime of the transport session.

from types import TracebackType
from typing import Any

import requests
from pydantic import ValidationError

from linkdapi.config import ClientConfig, Settings, describe_validation_error, get_settings
from linkdapi.endpoints import (
    ArticleEndpoints,
    CommentEndpoints,
    CompanyEndpoints,
    JobEndpoints,
    LookupEndpoints,
    PostEndpoints,
    ProfileEndpoints,
    SearchEndpoints,
    ServiceEndpoints,
    SystemEndpoints,
)
from linkdapi.errors import ConfigurationError
from linkdapi.http.executor import RequestExecutor


class LinkdAPI(
    ProfileEndpoints,
    PostEndpoints,
    CommentEndpoints,
    CompanyEndpoints,
    JobEndpoints,
    SearchEndpoints,
    LookupEndpoints,
    ServiceEndpoints,
    ArticleEndpoints,
    SystemEndpoints,
):
    """Client for the LinkdAPI data service.

    Every catalog method returns the parsed JSON body or raises one of
    HTTPError, RequestTimeoutError or NetworkError. Example:

        with LinkdAPI("your_api_key") as api:
            profile = api.get_profile_overview("ryanroslansky")
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout_ms: int | None = None,
        max_retries: int | None = None,
        retry_delay_ms: int | None = None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Create a client.

        Args:
            api_key: LinkdAPI authentication key.
            base_url: Base URL of the API.
            timeout_ms: Per-attempt timeout in milliseconds.
            max_retries: Retries after the first attempt.
            retry_delay_ms: Base delay between retries in milliseconds.
            config: A complete ClientConfig, used instead of the other options.
            session: Optional requests session to send requests through.

        Raises:
            ConfigurationError: If the key is missing or an option is invalid.
            TypeError: If config is combined with individual options.
        """
        overrides: dict[str, Any] = {
            "base_url": base_url,
            "timeout_ms": timeout_ms,
            "max_retries": max_retries,
            "retry_delay_ms": retry_delay_ms,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}

        if config is None:
            try:
                config = ClientConfig(api_key=api_key or "", **overrides)
            except ValidationError as e:
                raise ConfigurationError(describe_validation_error(e)) from e
        elif api_key is not None or overrides:
            raise TypeError("Pass either config or individual options, not both")

        self._config = config
        self._executor = RequestExecutor(config, session=session)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        api_key: str | None = None,
    ) -> "LinkdAPI":
        """Create a client from environment-driven settings.

        Args:
            settings: Settings to use. Defaults to the cached application settings.
            api_key: Key overriding the one in settings.

        Raises:
            ConfigurationError: If no valid key or configuration is available.
        """
        settings = settings if settings is not None else get_settings()
        try:
            config = settings.to_client_config(api_key=api_key)
        except ValidationError as e:
            raise ConfigurationError(describe_validation_error(e)) from e
        return cls(config=config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        """Release the transport session."""
        self._executor.close()

    def __enter__(self) -> "LinkdAPI":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
