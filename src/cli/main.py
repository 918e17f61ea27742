"""Typer application.

Without a subcommand the interactive operation menu starts. The other
commands list the operations, run one by number, submit a single issue, or
inspect and store the connection settings.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TypeVar

import typer
from pydantic import ValidationError
from pydantic_settings import BaseSettings
from rich.console import Console
from rich.logging import RichHandler

from adapters.response_renderer import ResponseRenderer
from cli import doctor
from cli.menu import MenuLoop
from cli.ui_components import build_operations_table, build_settings_table, print_banner
from core.config import AppSettings, SubmitterSettings, describe_settings, write_user_env_vars
from core.services.issue_submitter import submit_issue
from core.services.operations import Operation, OperationRunner, build_operation_registry

app = typer.Typer(
    help="Exercise the Issuetrak API: pick an operation, inspect the JSON response.",
    invoke_without_command=True,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

SettingsT = TypeVar("SettingsT", bound=BaseSettings)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; the client already does.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def load_settings(factory: Callable[[], SettingsT]) -> SettingsT:
    """Build settings or stop with a readable error; nothing works without them."""

    try:
        return factory()
    except ValidationError as exc:
        _console.print("[bold red]Invalid or missing configuration:[/bold red]")
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            _console.print(f"  - {field}: {error['msg']}", markup=False)
        _console.print("Run `issuetrak-console configure` or set the ISSUETRAK_* environment variables.")
        raise typer.Exit(code=2) from exc


def _registry(settings: AppSettings, renderer: ResponseRenderer) -> list[Operation]:
    return build_operation_registry(OperationRunner(settings, renderer))


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        menu()


@app.command()
def menu() -> None:
    """Interactive menu: choose an operation by number, repeat on "y"."""

    settings = load_settings(AppSettings)
    if not settings.clear_screen:
        print_banner(_console)
    with ResponseRenderer(_console, open_viewer=settings.open_viewer) as renderer:
        loop = MenuLoop(
            _registry(settings, renderer),
            _console,
            clear_screen=settings.clear_screen,
        )
        loop.run()


@app.command(name="list")
def list_operations() -> None:
    """Show the numbered operations."""

    settings = load_settings(AppSettings)
    with ResponseRenderer(_console, open_viewer=False) as renderer:
        _console.print(build_operations_table(_registry(settings, renderer)))


@app.command(name="run")
def run_operation(
    number: int = typer.Argument(..., help="1-based operation number (see `list`)."),
    keep: bool = typer.Option(False, "--keep", help="Keep the rendered response file when no viewer opens it."),
) -> None:
    """Run a single operation without the interactive menu.

    The response file stays in place when a viewer is launched for it.
    """

    settings = load_settings(AppSettings)
    renderer = ResponseRenderer(_console, open_viewer=settings.open_viewer)
    try:
        operations = _registry(settings, renderer)
        if not 1 <= number <= len(operations):
            raise typer.BadParameter(f"must be between 1 and {len(operations)}", param_hint="NUMBER")
        MenuLoop(operations, _console, clear_screen=False).execute(number)
    finally:
        if not keep and not settings.open_viewer:
            renderer.cleanup()


@app.command(name="create-issue")
def create_issue() -> None:
    """Submit one hardcoded issue as the configured user."""

    settings = load_settings(SubmitterSettings)
    response = asyncio.run(submit_issue(settings, _console))
    if not response.is_success:
        raise typer.Exit(code=1)


@app.command(name="settings")
def show_settings() -> None:
    """Show the effective settings (API key masked)."""

    settings = load_settings(AppSettings)
    _console.print(build_settings_table(describe_settings(settings)))


@app.command()
def configure() -> None:
    """Store the connection settings in the user config .env."""

    base_url = typer.prompt("Issuetrak API base URL").strip()
    api_version = typer.prompt("API version", default=1, type=int)
    api_key = typer.prompt("API key", hide_input=True).strip()
    username = typer.prompt("Username for create-issue (optional)", default="", show_default=False).strip()

    if not base_url or not api_key:
        raise typer.BadParameter("base URL and API key are required")
    if api_version < 1:
        raise typer.BadParameter("API version must be a positive number")

    values = {
        "ISSUETRAK_BASE_API_URL": base_url,
        "ISSUETRAK_URL": base_url,
        "ISSUETRAK_API_VERSION": str(api_version),
        "ISSUETRAK_API_KEY": api_key,
    }
    if username:
        values["ISSUETRAK_USERNAME"] = username

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved Issuetrak config to:[/green] {env_path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
