# ABOUTME: Result display helpers for rendering API responses with Rich.
# ABOUTME: Wraps JSON payloads in titled panels for the CLI.

import json
from typing import Any

from rich.json import JSON
from rich.panel import Panel


def render_json(data: Any, title: str = "Result") -> Panel:
    """Render a decoded JSON payload as a highlighted Rich Panel.

    Args:
        data: The decoded response body.
        title: Panel title.

    Returns:
        A Rich Panel containing the pretty-printed JSON.
    """
    return Panel(
        JSON(json.dumps(data, default=str)),
        title=title,
        border_style="blue",
        padding=(0, 1),
    )


def render_status(data: Any) -> Panel:
    """Render the service status payload, colored by whether it reports success."""
    healthy = isinstance(data, dict) and data.get("success", True) is not False
    return Panel(
        JSON(json.dumps(data, default=str)),
        title="Service Status",
        border_style="green" if healthy else "red",
        padding=(0, 1),
    )
