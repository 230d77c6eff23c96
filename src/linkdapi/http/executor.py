# ABOUTME: Request executor that runs API calls with timeout, retry, and error classification.
# ABOUTME: Wraps a requests session and converts every failure into one classified exception.

import json
import logging
import time
from collections.abc import Mapping
from typing import Any

import requests
from tenacity import RetryCallState

from linkdapi.config import ClientConfig
from linkdapi.errors import LinkdAPIError
from linkdapi.http.exceptions import HTTPError, NetworkError, RequestTimeoutError
from linkdapi.http.request import HttpMethod, ParamValue, RequestDescriptor
from linkdapi.http.retry import AttemptOutcome, OutcomeKind, RetryPolicy

logger = logging.getLogger(__name__)

USER_AGENT = "LinkdAPI-Python-Client/1.0"
API_KEY_HEADER = "X-linkdapi-apikey"
CHUNK_SIZE = 1024


class RequestExecutor:
    """Executes LinkdAPI requests for a single client configuration.

    Each call runs a sequential attempt loop driven by tenacity: one request
    per attempt, bounded by the configured timeout, with linear backoff
    between retryable failures. All calls share one requests.Session, which
    is not thread-safe, so concurrent callers should use one client per
    thread.
    """

    def __init__(
        self,
        config: ClientConfig,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            config: Immutable client configuration.
            session: Optional transport session. A new one is created and
                owned by the executor when omitted.
        """
        self._config = config
        self._policy = RetryPolicy.from_config(config)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    @property
    def headers(self) -> dict[str, str]:
        """Return the fixed header set sent with every request."""
        return {
            API_KEY_HEADER: self._config.api_key,
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    def execute(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, ParamValue] | None = None,
    ) -> Any:
        """Execute a request and return the parsed JSON body.

        Args:
            method: HTTP method to use.
            path: Endpoint path relative to the base URL.
            params: Query parameters; None and empty-string values are dropped.

        Returns:
            The decoded JSON response body.

        Raises:
            HTTPError: On a 4xx response, or a 5xx response once retries are exhausted.
            RequestTimeoutError: If the final attempt timed out.
            NetworkError: On an unparseable body, or transport failures once
                retries are exhausted.
        """
        request = RequestDescriptor(path=path, params=dict(params or {}), method=HttpMethod(method))
        url = request.url(self._config.base_url)

        logger.debug("%s %s", request.method.value, url)
        retrying = self._policy.retrying(sleep=time.sleep, before_sleep=self._log_retry)
        outcome = retrying(self._attempt, request.method, url)

        if outcome.kind is OutcomeKind.SUCCESS:
            return outcome.body

        error = self._classify(outcome)
        if self._policy.is_retryable(outcome):
            logger.error(
                "Request to %s failed after %d attempts: %s",
                request.path,
                self._policy.max_attempts,
                error,
            )
        raise error from outcome.cause

    def _log_retry(self, retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome.result()
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.warning(
            "Attempt %d/%d failed (%s), retrying in %.2fs",
            retry_state.attempt_number,
            self._policy.max_attempts,
            outcome.kind.value,
            delay,
        )

    def _attempt(self, method: HttpMethod, url: str) -> AttemptOutcome:
        """Run one request under the attempt deadline and classify its result.

        The deadline covers connecting, waiting for headers, and reading the
        whole body. The body is streamed so the connection can be dropped as
        soon as the deadline passes, even while data keeps trickling in.
        """
        deadline = time.monotonic() + self._config.timeout_seconds
        try:
            response = self._session.request(
                method.value,
                url,
                headers=self.headers,
                timeout=max(deadline - time.monotonic(), 0.0),
                stream=True,
            )
        except requests.Timeout as e:
            return AttemptOutcome.timeout(e)
        except requests.RequestException as e:
            return AttemptOutcome.transport_failure(e)

        try:
            content = _read_body(response, deadline)
        except requests.RequestException as e:
            if time.monotonic() >= deadline:
                return AttemptOutcome.timeout(e)
            return AttemptOutcome.transport_failure(e)
        finally:
            response.close()

        if content is None:
            logger.debug("Deadline of %dms passed while reading %s", self._config.timeout_ms, url)
            return AttemptOutcome.timeout()

        text = content.decode(response.encoding or "utf-8", errors="replace")
        if not response.ok:
            return AttemptOutcome.http_failure(response.status_code, response.reason or "", text)

        try:
            return AttemptOutcome.success(json.loads(text))
        except ValueError as e:
            return AttemptOutcome.parse_failure(e)

    def _classify(self, outcome: AttemptOutcome) -> LinkdAPIError:
        """Convert the last attempt outcome into the error surfaced to the caller."""
        if outcome.kind is OutcomeKind.HTTP_FAILURE:
            return HTTPError(
                outcome.status_code or 0,
                outcome.status_text,
                outcome.response_body,
            )

        if outcome.kind is OutcomeKind.TIMEOUT:
            return RequestTimeoutError(f"Request timed out after {self._config.timeout_ms}ms")

        if outcome.kind is OutcomeKind.PARSE_FAILURE:
            return NetworkError(f"Invalid JSON in response: {outcome.cause}", outcome.cause)

        attempts = self._policy.max_attempts
        return NetworkError(
            f"Request failed after {attempts} attempts: {outcome.cause or 'Unknown error'}",
            outcome.cause,
        )

    def close(self) -> None:
        """Close the transport session if the executor created it."""
        if self._owns_session:
            self._session.close()


def _read_body(response: requests.Response, deadline: float) -> bytes | None:
    """Read a streamed response body, or return None once the deadline passes."""
    if time.monotonic() >= deadline:
        return None
    chunks = []
    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
        chunks.append(chunk)
        if time.monotonic() >= deadline:
            return None
    return b"".join(chunks)
