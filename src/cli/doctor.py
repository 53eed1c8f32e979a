"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    # Any HTTP answer (even 401) proves the endpoint is reachable.
    try:
        async with build_async_client(settings) as client:
            response = await client.get("/_apis/connectionData")
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="tsbot Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.access_token:
        table.add_row("Access token", "OK", "TSBOT_ACCESS_TOKEN is set")
    else:
        table.add_row("Access token", "MISSING", "Pass --token or run `tsbot doctor set-token`")
    table.add_row("Global endpoint", "OK", settings.global_base_url)
    table.add_row("API version", "OK", settings.api_version)

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="set-token")
def set_token() -> None:
    """Store an access token in the user config .env."""

    token = typer.prompt("Access token", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("token cannot be empty")

    env_path = write_user_env_vars({"TSBOT_ACCESS_TOKEN": token})
    _console.print(f"[green]Saved access token to:[/green] {env_path}")
