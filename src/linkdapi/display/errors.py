# ABOUTME: Error display helpers for formatting client errors with Rich.
# ABOUTME: Provides a panel per error kind: HTTP status, timeout, network, and missing API key.

import traceback

from rich.panel import Panel
from rich.text import Text

from linkdapi.http.exceptions import HTTPError, NetworkError, RequestTimeoutError

MAX_BODY_PREVIEW = 500


def display_error(error: Exception, verbose: bool = False) -> Panel:
    """Format an error as a Rich Panel.

    Args:
        error: The exception to display.
        verbose: If True, include full traceback information.

    Returns:
        A Rich Panel containing formatted error information.
    """
    content = Text()
    content.append(f"{type(error).__name__}: ", style="bold red")
    content.append(str(error), style="red")

    if verbose:
        content.append("\n\n")
        content.append("Traceback:", style="dim")
        content.append("\n")
        tb_text = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        content.append(tb_text, style="dim")

    return Panel(
        content,
        title="Error",
        border_style="red",
        padding=(1, 2),
    )


def display_http_error(error: HTTPError) -> Panel:
    """Display an HTTP error with its status and a preview of the response body."""
    message = Text()
    message.append(f"{error.status_code} {error.status_text}\n", style="bold red")

    if error.response_body:
        body = error.response_body
        if len(body) > MAX_BODY_PREVIEW:
            body = body[: MAX_BODY_PREVIEW - 3] + "..."
        message.append("\n")
        message.append(body, style="dim")

    message.append("\n\n")
    if error.status_code in (401, 403):
        message.append("Check that your API key is valid. Run 'linkdapi login' to replace it.")
    elif error.is_client_error:
        message.append("The request was rejected. Check the parameters you passed.")
    else:
        message.append("The service is having trouble. Try again in a few moments.")

    return Panel(
        message,
        title="API Error",
        border_style="red",
        padding=(1, 2),
    )


def display_timeout_error(error: RequestTimeoutError) -> Panel:
    """Display a timeout with a hint about raising the timeout."""
    message = Text()
    message.append(f"{error}\n\n", style="bold red")
    message.append("Suggestions:\n", style="bold")
    message.append("• Increase LINKDAPI_TIMEOUT_MS\n", style="dim")
    message.append("• Try again in a few moments", style="dim")

    return Panel(
        message,
        title="Timeout",
        border_style="yellow",
        padding=(1, 2),
    )


def display_network_error(error: NetworkError) -> Panel:
    """Display a user-friendly message for network errors.

    Args:
        error: The network-related exception.

    Returns:
        A Rich Panel with retry suggestions.
    """
    message = Text()
    message.append("Network Error\n\n", style="bold red")
    message.append(f"{error}\n\n", style="red")
    message.append("Suggestions:\n", style="bold")
    message.append("• Check your internet connection\n", style="dim")
    message.append("• Try again in a few moments\n", style="dim")
    message.append("• LinkdAPI may be temporarily unavailable", style="dim")

    return Panel(
        message,
        title="Connection Error",
        border_style="red",
        padding=(1, 2),
    )


def display_api_key_help() -> Panel:
    """Display help for providing a LinkdAPI key."""
    help_text = """[bold cyan]No LinkdAPI key found.[/bold cyan]

Provide a key in one of these ways:

1. Pass [bold]--api-key[/bold] to the command
2. Set the [bold yellow]LINKDAPI_API_KEY[/bold yellow] environment variable
3. Store it in your OS keyring with [bold]linkdapi login[/bold]

[dim]Get a key at https://linkdapi.com/?p=signup[/dim]"""

    return Panel(
        Text.from_markup(help_text),
        title="API Key Help",
        border_style="cyan",
        padding=(1, 2),
    )


def render_client_error(error: Exception, verbose: bool = False) -> Panel:
    """Pick the panel matching the kind of error raised by a client call."""
    if isinstance(error, HTTPError):
        return display_http_error(error)
    if isinstance(error, RequestTimeoutError):
        return display_timeout_error(error)
    if isinstance(error, NetworkError):
        return display_network_error(error)
    return display_error(error, verbose=verbose)
