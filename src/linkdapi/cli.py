# ABOUTME: Command-line interface for the LinkdAPI client using Typer.
# ABOUTME: Provides login, logout, status, and lookup commands that print JSON results with Rich.

import logging
from collections.abc import Callable
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from linkdapi.auth import ApiKeyStore
from linkdapi.client import LinkdAPI
from linkdapi.config import describe_validation_error, get_settings
from linkdapi.display.errors import display_api_key_help, display_error, render_client_error
from linkdapi.display.output import render_json, render_status
from linkdapi.endpoints.filters import JobSearchFilter, PeopleSearchFilter
from linkdapi.errors import ConfigurationError, LinkdAPIError, MissingParameterError

app = typer.Typer(
    name="linkdapi",
    help="Query LinkdAPI profile, company, and job data from the terminal.",
    add_completion=False,
)

console = Console()

ApiKeyOption = Annotated[
    str | None,
    typer.Option("--api-key", "-k", help="API key to use instead of the stored one."),
]

AccountOption = Annotated[
    str,
    typer.Option("--account", "-a", help="Stored account whose API key to use."),
]

StartOption = Annotated[int, typer.Option("--start", help="Pagination start index.", min=0)]


def _configure_logging(level: str) -> None:
    """Route library logging through Rich at the given level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _get_key_store() -> ApiKeyStore:
    return ApiKeyStore(accounts_file=get_settings().accounts_file)


def _resolve_api_key(api_key: str | None, account: str) -> str | None:
    """Resolve the API key from the option, the environment, then the keyring."""
    if api_key:
        return api_key
    settings = get_settings()
    if settings.api_key:
        return settings.api_key
    return _get_key_store().get_key(account)


def _build_client(api_key: str | None, account: str) -> LinkdAPI:
    """Create a client or exit with a help panel if no usable key is available."""
    resolved = _resolve_api_key(api_key, account)
    if not resolved:
        console.print(display_api_key_help())
        raise typer.Exit(code=1)

    try:
        return LinkdAPI.from_settings(get_settings(), api_key=resolved)
    except ConfigurationError as e:
        console.print(display_error(e))
        raise typer.Exit(code=1) from None


def _is_verbose(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


def _run(
    ctx: typer.Context,
    api_key: str | None,
    account: str,
    call: Callable[[LinkdAPI], Any],
    title: str,
) -> None:
    """Run one client call and print its result or the classified error."""
    with _build_client(api_key, account) as api:
        try:
            result = call(api)
        except (LinkdAPIError, MissingParameterError) as e:
            console.print(render_client_error(e, verbose=_is_verbose(ctx)))
            raise typer.Exit(code=1) from None

    console.print(render_json(result, title=title))


def _render_accounts_panel(accounts: list[str], active: str) -> Panel:
    """Render stored accounts as a Rich Panel.

    Args:
        accounts: List of stored account names.
        active: The account selected for this invocation.

    Returns:
        Rich Panel containing formatted account list.
    """
    content: str | Table
    if not accounts:
        content = "[dim]No accounts stored. Run 'linkdapi login' to add one.[/dim]"
    else:
        table = Table(show_header=True, box=None, padding=(0, 1))
        table.add_column("Account", style="cyan")
        table.add_column("Status", style="dim")

        for account in accounts:
            status_text = "[green]Selected[/green]" if account == active else "[dim]Stored[/dim]"
            table.add_row(account, status_text)

        content = table

    return Panel(
        content,
        title="Stored Accounts",
        border_style="magenta",
        padding=(1, 2),
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show request and retry logging."),
    ] = False,
) -> None:
    """LinkdAPI command-line client.

    Look up profiles, companies, and jobs. Results are printed as JSON.
    """
    ctx.obj = {"verbose": verbose}
    try:
        log_level = get_settings().log_level
    except ValidationError as e:
        console.print(display_error(ConfigurationError(describe_validation_error(e))))
        raise typer.Exit(code=1) from None
    _configure_logging("DEBUG" if verbose else log_level)
    if ctx.invoked_subcommand is None:
        console.print("[dim]Use --help to see available commands.[/dim]")


@app.command()
def login(account: AccountOption = "default") -> None:
    """Store a LinkdAPI key in the OS keyring."""
    key_store = _get_key_store()

    api_key = Prompt.ask("[bold]Paste your LinkdAPI key[/bold]", password=True)

    if not key_store.validate_key_format(api_key):
        console.print("[red]Error: Invalid API key format.[/red]")
        console.print(
            f"[dim]The key should be at least {key_store.MIN_KEY_LENGTH} characters long.[/dim]"
        )
        raise typer.Exit(code=1)

    key_store.store_key(api_key, account)
    console.print(f"[green]Success! API key stored for account '[bold]{account}[/bold]'.[/green]")


@app.command()
def logout(account: AccountOption = "default") -> None:
    """Remove a stored LinkdAPI key from the OS keyring."""
    if _get_key_store().delete_key(account):
        console.print(f"[green]Removed API key for account '[bold]{account}[/bold]'.[/green]")
    else:
        console.print(f"[yellow]No API key stored for account '{account}'.[/yellow]")


@app.command()
def status(
    ctx: typer.Context,
    api_key: ApiKeyOption = None,
    account: AccountOption = "default",
) -> None:
    """Show service status and stored accounts."""
    with _build_client(api_key, account) as api:
        try:
            result = api.get_service_status()
        except LinkdAPIError as e:
            console.print(render_client_error(e, verbose=_is_verbose(ctx)))
            raise typer.Exit(code=1) from None

    console.print(render_status(result))
    console.print()
    console.print(_render_accounts_panel(_get_key_store().list_accounts(), account))


@app.command()
def profile(
    ctx: typer.Context,
    username: Annotated[str, typer.Argument(help="Profile username.")],
    full: Annotated[
        bool,
        typer.Option("--full", help="Fetch the complete profile instead of the overview."),
    ] = False,
    api_key: ApiKeyOption = None,
    account: AccountOption = "default",
) -> None:
    """Look up a profile by username."""
    if full:
        _run(ctx, api_key, account, lambda api: api.get_full_profile(username=username), username)
    else:
        _run(ctx, api_key, account, lambda api: api.get_profile_overview(username), username)


@app.command()
def company(
    ctx: typer.Context,
    company_id: Annotated[str | None, typer.Option("--id", help="Company ID.")] = None,
    name: Annotated[str | None, typer.Option("--name", help="Company name.")] = None,
    api_key: ApiKeyOption = None,
    account: AccountOption = "default",
) -> None:
    """Look up company details by ID or name."""
    _run(
        ctx,
        api_key,
        account,
        lambda api: api.get_company_info(company_id=company_id, name=name),
        "Company",
    )


@app.command()
def jobs(
    ctx: typer.Context,
    company_ids: Annotated[list[str], typer.Argument(help="One or more company IDs.")],
    start: StartOption = 0,
    api_key: ApiKeyOption = None,
    account: AccountOption = "default",
) -> None:
    """List open jobs for one or more companies."""
    _run(
        ctx,
        api_key,
        account,
        lambda api: api.get_company_jobs(company_ids, start=start),
        "Jobs",
    )


@app.command("search-jobs")
def search_jobs(
    ctx: typer.Context,
    keyword: Annotated[str | None, typer.Option("--keyword", help="Job title or skills.")] = None,
    location: Annotated[str | None, typer.Option("--location", help="City or region.")] = None,
    company_ids: Annotated[
        list[str] | None, typer.Option("--company", help="Company ID; repeatable.")
    ] = None,
    job_types: Annotated[
        list[str] | None, typer.Option("--job-type", help="Employment type; repeatable.")
    ] = None,
    start: StartOption = 0,
    api_key: ApiKeyOption = None,
    account: AccountOption = "default",
) -> None:
    """Search job listings."""
    job_filter = JobSearchFilter(
        keyword=keyword,
        location=location,
        company_ids=company_ids,
        job_types=job_types,
        start=start,
    )
    _run(ctx, api_key, account, lambda api: api.search_jobs(job_filter), "Job Search")


@app.command("search-people")
def search_people(
    ctx: typer.Context,
    keyword: Annotated[str | None, typer.Option("--keyword", help="Search keyword.")] = None,
    title: Annotated[str | None, typer.Option("--title", help="Job title.")] = None,
    current_company: Annotated[
        list[str] | None, typer.Option("--company", help="Current company ID; repeatable.")
    ] = None,
    start: StartOption = 0,
    api_key: ApiKeyOption = None,
    account: AccountOption = "default",
) -> None:
    """Search people."""
    people_filter = PeopleSearchFilter(
        keyword=keyword,
        title=title,
        current_company=current_company,
        start=start,
    )
    _run(ctx, api_key, account, lambda api: api.search_people(people_filter), "People Search")


if __name__ == "__main__":
    app()
