# ABOUTME: Display module for Rich terminal output formatting.
# ABOUTME: Exports panels for API results and for each kind of client error.

from linkdapi.display.errors import (
    display_api_key_help,
    display_error,
    display_http_error,
    display_network_error,
    display_timeout_error,
    render_client_error,
)
from linkdapi.display.output import render_json, render_status

__all__ = [
    "display_api_key_help",
    "display_error",
    "display_http_error",
    "display_network_error",
    "display_timeout_error",
    "render_client_error",
    "render_json",
    "render_status",
]
