# ABOUTME: Main package initialization for the LinkdAPI Python client.
# ABOUTME: Exports the client, its configuration, and the error taxonomy.

from importlib.metadata import version

from linkdapi.client import LinkdAPI
from linkdapi.config import ClientConfig
from linkdapi.errors import ConfigurationError, LinkdAPIError, MissingParameterError
from linkdapi.http.exceptions import HTTPError, NetworkError, RequestTimeoutError

__version__ = version("linkdapi")

__all__ = [
    "LinkdAPI",
    "ClientConfig",
    "LinkdAPIError",
    "ConfigurationError",
    "MissingParameterError",
    "HTTPError",
    "NetworkError",
    "RequestTimeoutError",
]
