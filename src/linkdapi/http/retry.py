# ABOUTME: Attempt outcome classification and the linear retry/backoff policy.
# ABOUTME: Builds the tenacity controller that decides whether and when an attempt is repeated.

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tenacity import RetryCallState, Retrying, retry_if_result, stop_after_attempt

from linkdapi.config import ClientConfig


class OutcomeKind(str, Enum):
    """Result categories for a single request attempt."""

    SUCCESS = "success"
    HTTP_FAILURE = "http_failure"
    TIMEOUT = "timeout"
    TRANSPORT_FAILURE = "transport_failure"
    PARSE_FAILURE = "parse_failure"


@dataclass(frozen=True)
class AttemptOutcome:
    """The classified result of one attempt, consumed by the retry loop."""

    kind: OutcomeKind
    body: Any = None
    status_code: int | None = None
    status_text: str = ""
    response_body: str | None = None
    cause: BaseException | None = None

    @classmethod
    def success(cls, body: Any) -> "AttemptOutcome":
        return cls(OutcomeKind.SUCCESS, body=body)

    @classmethod
    def http_failure(
        cls, status_code: int, status_text: str, response_body: str | None = None
    ) -> "AttemptOutcome":
        return cls(
            OutcomeKind.HTTP_FAILURE,
            status_code=status_code,
            status_text=status_text,
            response_body=response_body,
        )

    @classmethod
    def timeout(cls, cause: BaseException | None = None) -> "AttemptOutcome":
        return cls(OutcomeKind.TIMEOUT, cause=cause)

    @classmethod
    def transport_failure(cls, cause: BaseException) -> "AttemptOutcome":
        return cls(OutcomeKind.TRANSPORT_FAILURE, cause=cause)

    @classmethod
    def parse_failure(cls, cause: BaseException) -> "AttemptOutcome":
        return cls(OutcomeKind.PARSE_FAILURE, cause=cause)

    @property
    def is_client_error(self) -> bool:
        """Return True for a 4xx HTTP failure."""
        return (
            self.kind is OutcomeKind.HTTP_FAILURE
            and self.status_code is not None
            and 400 <= self.status_code < 500
        )


@dataclass(frozen=True)
class RetryPolicy:
    """Linear backoff retry policy.

    Attempt n (0-based) that fails with a retryable outcome is followed by a
    wait of ``retry_delay_ms * (n + 1)`` before attempt n + 1, up to
    ``max_retries`` retries.
    """

    max_retries: int
    retry_delay_ms: int

    @classmethod
    def from_config(cls, config: ClientConfig) -> "RetryPolicy":
        return cls(max_retries=config.max_retries, retry_delay_ms=config.retry_delay_ms)

    @property
    def max_attempts(self) -> int:
        """Total number of attempts, including the first one."""
        return self.max_retries + 1

    def is_retryable(self, outcome: AttemptOutcome) -> bool:
        """Return True if the outcome may succeed on another attempt.

        Server errors, timeouts and transport failures are retryable. 4xx
        responses and unparseable bodies are final.
        """
        if outcome.kind is OutcomeKind.HTTP_FAILURE:
            return not outcome.is_client_error
        return outcome.kind in (OutcomeKind.TIMEOUT, OutcomeKind.TRANSPORT_FAILURE)

    def backoff_seconds(self, attempt: int) -> float:
        """Return the delay to wait after failed attempt ``attempt`` (0-based)."""
        return self.retry_delay_ms * (attempt + 1) / 1000

    def wait(self, retry_state: RetryCallState) -> float:
        """tenacity wait strategy applying the linear backoff."""
        return self.backoff_seconds(retry_state.attempt_number - 1)

    def retrying(
        self,
        sleep: Callable[[float], None] = time.sleep,
        before_sleep: Callable[[RetryCallState], None] | None = None,
    ) -> Retrying:
        """Build a retry controller for one logical call.

        The controller repeats a callable returning AttemptOutcome while the
        outcome is retryable and attempts remain. When they run out, the last
        outcome is returned instead of raising.

        Args:
            sleep: Function used to wait between attempts.
            before_sleep: Hook called after a failed attempt, before waiting.

        Returns:
            A tenacity Retrying instance.
        """
        return Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self.wait,
            retry=retry_if_result(self.is_retryable),
            sleep=sleep,
            before_sleep=before_sleep,
            retry_error_callback=_last_outcome,
        )


def _last_outcome(retry_state: RetryCallState) -> AttemptOutcome:
    return retry_state.outcome.result()
