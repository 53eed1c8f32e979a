"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import (
    Account,
    BuildDefinitionReference,
    Profile,
    TeamProjectReference,
)


def build_profile_panel(profile: Profile) -> Panel:
    """Panel con el perfil del dueño del token."""

    body = Text()
    body.append(f"{profile.display_name or '-'}\n", style="bold")
    if profile.email_address:
        body.append(f"{profile.email_address}\n")
    body.append(f"id: {profile.id}", style="dim")
    return Panel(body, title=Text("Profile", style="bold cyan"), border_style="cyan")


def build_accounts_table(accounts: Sequence[Account]) -> Table:
    table = Table(title="Accounts")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("URI", style="magenta")
    table.add_column("Status", style="green")
    for account in accounts:
        table.add_row(account.account_name, account.account_uri, account.account_status or "")
    return table


def build_projects_table(projects: Sequence[TeamProjectReference], *, account: str) -> Table:
    table = Table(title=f"Projects in {account}")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("State", style="green")
    table.add_column("Description", style="white")
    for project in projects:
        table.add_row(project.name, project.state or "", project.description or "")
    return table


def build_definitions_table(definitions: Sequence[BuildDefinitionReference], *, project: str) -> Table:
    table = Table(title=f"Build definitions in {project}")
    table.add_column("Id", style="dim", justify="right")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Path", style="white")
    table.add_column("Queue", style="green")
    for definition in definitions:
        table.add_row(str(definition.id), definition.name, definition.path or "", definition.queue_status or "")
    return table
