"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.response_renderer import ResponseRenderer
from core.config import AppSettings, get_user_env_file, mask_secret
from core.domain.api import ApiResponse

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.base_api_url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_temporary_files() -> tuple[bool, str]:
    """Render a dummy response to detect an unwritable temp directory."""

    try:
        with ResponseRenderer(Console(quiet=True), open_viewer=False) as renderer:
            path = renderer.render("doctor", ApiResponse(status_code=200, response_text="ok"))
        return True, f"OK ({path.parent})"
    except OSError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    table = Table(title="Issuetrak Console Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    settings: AppSettings | None
    try:
        settings = AppSettings()
    except ValidationError as exc:
        settings = None
        missing = ", ".join(str(error["loc"][0]) for error in exc.errors())
        table.add_row("Configuration", "FAIL", f"Invalid or missing: {missing}")

    if settings is not None:
        table.add_row("Base API URL", "OK", settings.base_api_url)
        table.add_row("API version", "OK", str(settings.api_version))
        table.add_row("API key", "OK", mask_secret(settings.api_key))

        ok_http, detail_http = asyncio.run(_check_http(settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    ok_tmp, detail_tmp = _check_temporary_files()
    table.add_row("Temporary files", "OK" if ok_tmp else "FAIL", detail_tmp)

    _console.print(table)

    if settings is None:
        _console.print(
            f"\n[yellow]Note:[/yellow] run `issuetrak-console configure` to store the connection "
            f"settings in {get_user_env_file()}, or export ISSUETRAK_BASE_API_URL, "
            "ISSUETRAK_API_VERSION and ISSUETRAK_API_KEY."
        )
