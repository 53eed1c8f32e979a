"""Contratos de conexión y capacidades remotas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el adaptador httpx por fakes en tests sin acoplar el Core
  a implementaciones concretas.

Reglas de diseño:
- Todas las consultas son asíncronas porque hacen I/O (HTTP).
- Obtener un cliente NO hace ninguna llamada remota: es un handle.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.capabilities import CapabilityKind
from core.domain.models import (
    Account,
    BuildDefinitionReference,
    OAuthToken,
    Profile,
    TeamProjectReference,
)


@runtime_checkable
class ProfileClient(Protocol):
    async def get_profile(self) -> Profile:
        """Devuelve el perfil del usuario autenticado."""

        ...


@runtime_checkable
class AccountClient(Protocol):
    async def get_accounts_for_member(self, member_id: str) -> list[Account]:
        """Devuelve todas las cuentas del miembro, sin filtro de nombre."""

        ...


@runtime_checkable
class ProjectClient(Protocol):
    async def get_projects(
        self,
        *,
        state_filter: str | None = None,
        top: int | None = None,
        skip: int | None = None,
    ) -> list[TeamProjectReference]:
        """Devuelve los team projects de la cuenta de la conexión."""

        ...


@runtime_checkable
class BuildClient(Protocol):
    async def get_definitions(
        self,
        project_id: str,
        *,
        name: str | None = None,
        definition_ids: list[int] | None = None,
        min_metrics_time: str | None = None,
        built_after: str | None = None,
        not_built_after: str | None = None,
    ) -> list[BuildDefinitionReference]:
        """Devuelve las definiciones de build de un proyecto (por identidad)."""

        ...


@runtime_checkable
class Connection(Protocol):
    """Contexto (credencial + endpoint) del que se obtienen clientes por tipo."""

    base_url: str

    def get_client(self, kind: CapabilityKind) -> Any:
        """Devuelve el cliente de la capacidad `kind` (misma instancia si se repite)."""

        ...

    async def __aenter__(self) -> "Connection": ...

    async def __aexit__(self, *exc_info: object) -> None: ...


@runtime_checkable
class ConnectionFactory(Protocol):
    def open(self, token: OAuthToken | None, base_url: str | None = None) -> Connection:
        """Abre una conexión global (`base_url=None`) o acotada a una cuenta."""

        ...
