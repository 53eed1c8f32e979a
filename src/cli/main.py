"""CLI principal (Typer).

Por qué una CLI fina:
- Es un host de prueba del facade: cada comando llama a una operación de
  `VstsService` y solo se ocupa de pintar (Rich) o volcar JSON.
- Los errores del Core se traducen aquí a mensajes y exit codes; el Core nunca
  imprime ni registra errores.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

import httpx
import typer
from rich.console import Console

from adapters.json_exporter import dump_models_json
from cli import doctor
from cli.ui_components import (
    build_accounts_table,
    build_definitions_table,
    build_profile_panel,
    build_projects_table,
)
from core.config import AppSettings
from core.domain.models import OAuthToken
from core.errors import InvalidArgumentError, NameResolutionError
from core.services.vsts_service import VstsService

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Team Services bot facade: profile, accounts, projects, builds.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

TokenOption = typer.Option(None, "--token", "-t", help="Access token (defaults to TSBOT_ACCESS_TOKEN).")
JsonOption = typer.Option(False, "--json", help="Print JSON instead of a table.")


def _token(value: str | None, settings: AppSettings) -> OAuthToken:
    return OAuthToken(access_token=value or settings.access_token)


def _call(factory: Callable[[VstsService], Awaitable[T]]) -> T:
    service = VstsService()
    try:
        return asyncio.run(factory(service))
    except InvalidArgumentError as exc:
        _err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc
    except NameResolutionError as exc:
        _err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPStatusError as exc:
        _err_console.print(f"[red]Remote error:[/red] HTTP {exc.response.status_code} {exc.request.url}")
        raise typer.Exit(code=1) from exc


@app.callback()
def _configure() -> None:
    settings = AppSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def profile(token: Optional[str] = TokenOption, as_json: bool = JsonOption) -> None:
    """Show the profile of the token owner."""

    oauth = _token(token, AppSettings())
    result = _call(lambda service: service.get_profile(oauth))
    if as_json:
        typer.echo(dump_models_json(result), nl=False)
        return
    _console.print(build_profile_panel(result))


@app.command()
def accounts(
    member_id: Optional[str] = typer.Option(None, "--member-id", help="Member id (defaults to the token owner)."),
    token: Optional[str] = TokenOption,
    as_json: bool = JsonOption,
) -> None:
    """List the accounts of a member."""

    oauth = _token(token, AppSettings())

    async def _accounts(service: VstsService):
        member = member_id or (await service.get_profile(oauth)).id
        return await service.get_accounts(oauth, member)

    result = _call(_accounts)
    if as_json:
        typer.echo(dump_models_json(result), nl=False)
        return
    _console.print(build_accounts_table(result))


@app.command()
def projects(
    account: str = typer.Argument(..., help="Account name (case-insensitive)."),
    token: Optional[str] = TokenOption,
    as_json: bool = JsonOption,
) -> None:
    """List the team projects of an account."""

    oauth = _token(token, AppSettings())
    result = _call(lambda service: service.get_projects(account, oauth))
    if as_json:
        typer.echo(dump_models_json(result), nl=False)
        return
    _console.print(build_projects_table(result, account=account))


@app.command()
def builds(
    project: str = typer.Argument(..., help="Project name (case-insensitive)."),
    account: str = typer.Argument(..., help="Account name (case-insensitive)."),
    token: Optional[str] = TokenOption,
    as_json: bool = JsonOption,
) -> None:
    """List the build definitions of a project."""

    oauth = _token(token, AppSettings())
    result = _call(lambda service: service.get_build_definitions(project, account, oauth))
    if as_json:
        typer.echo(dump_models_json(result), nl=False)
        return
    _console.print(build_definitions_table(result, project=project))


def run() -> None:
    app()
