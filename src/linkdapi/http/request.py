# ABOUTME: Request construction helpers for LinkdAPI calls.
# ABOUTME: Builds URLs and query strings, dropping empty values and joining list parameters.

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlencode

Scalar = str | int | float | bool
ParamValue = Scalar | None
ListParam = str | Iterable[str] | None


class HttpMethod(str, Enum):
    """HTTP methods supported by the executor."""

    GET = "GET"


def serialize_value(value: Scalar) -> str:
    """Convert a scalar parameter into its query string form.

    Booleans become the lowercase literals ``true``/``false``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join_values(values: ListParam) -> str | None:
    """Normalize a single value or a list of values into one comma-joined string.

    Order is preserved and duplicates are kept.

    Args:
        values: A string, an iterable of strings, or None.

    Returns:
        The joined string, or None when nothing was given.
    """
    if values is None:
        return None
    if isinstance(values, str):
        return values
    return ",".join(str(value) for value in values)


def format_flag(value: bool | None) -> str | None:
    """Serialize an optional boolean filter flag.

    Returns None when the flag was not explicitly provided, so absence is
    never sent as ``false``.
    """
    if value is None:
        return None
    return serialize_value(value)


@dataclass(frozen=True)
class RequestDescriptor:
    """A single API request: method, endpoint path and ordered parameters."""

    path: str
    params: Mapping[str, ParamValue] = field(default_factory=dict)
    method: HttpMethod = HttpMethod.GET

    def query_params(self) -> list[tuple[str, str]]:
        """Return the parameters that will be sent, in insertion order."""
        return [
            (key, serialize_value(value))
            for key, value in self.params.items()
            if value is not None and value != ""
        ]

    def query_string(self) -> str:
        """Return the URL-encoded query string without a leading '?'."""
        return urlencode(self.query_params())

    def url(self, base_url: str) -> str:
        """Build the full request URL against a base URL.

        Args:
            base_url: Base address of the API; a trailing slash is ignored.

        Returns:
            The absolute URL including the query string, if any.
        """
        url = f"{base_url.rstrip('/')}/{self.path.lstrip('/')}"
        query = self.query_string()
        if query:
            url = f"{url}?{query}"
        return url
