# ABOUTME: HTTP package implementing the request execution engine.
# ABOUTME: Exports the executor, request descriptor, retry policy, and classified errors.

from linkdapi.http.exceptions import HTTPError, NetworkError, RequestTimeoutError
from linkdapi.http.executor import RequestExecutor
from linkdapi.http.request import HttpMethod, RequestDescriptor, format_flag, join_values
from linkdapi.http.retry import AttemptOutcome, OutcomeKind, RetryPolicy

__all__ = [
    "RequestExecutor",
    "RequestDescriptor",
    "HttpMethod",
    "RetryPolicy",
    "AttemptOutcome",
    "OutcomeKind",
    "HTTPError",
    "NetworkError",
    "RequestTimeoutError",
    "join_values",
    "format_flag",
]
