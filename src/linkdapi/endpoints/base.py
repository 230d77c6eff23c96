# ABOUTME: Shared base for endpoint catalog groups.
# ABOUTME: Routes every catalog call through the client's request executor as a GET.

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from linkdapi.http.executor import RequestExecutor
from linkdapi.http.request import HttpMethod, ParamValue

API_PREFIX = "api/v1"

F = TypeVar("F", bound=BaseModel)


def api_path(path: str) -> str:
    """Return the versioned API path for an endpoint."""
    return f"{API_PREFIX}/{path}"


class EndpointGroup:
    """Base class for catalog mixins.

    Subclasses only shape parameters; execution, retries and error
    classification belong to the executor provided by the client.
    """

    _executor: RequestExecutor

    def _get(self, path: str, params: Mapping[str, ParamValue] | None = None) -> Any:
        return self._executor.execute(HttpMethod.GET, path, params)


def build_filter(model: type[F], filter: F | None, options: dict[str, Any]) -> F:
    """Return the given filter, or build one from keyword options.

    Raises:
        TypeError: If both a filter and keyword options are supplied.
    """
    if filter is not None:
        if options:
            raise TypeError("Pass either a filter or keyword options, not both")
        return filter
    return model(**options)
