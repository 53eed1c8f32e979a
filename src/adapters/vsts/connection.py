"""Conexión httpx a la plataforma.

Responsabilidad:
- Vincular (token, endpoint) a un único `httpx.AsyncClient`.
- Entregar clientes de capacidad por `CapabilityKind`, construidos bajo demanda
  y reutilizados mientras viva la conexión.
- No se hace ninguna llamada remota al abrir ni al pedir un cliente.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from adapters.http_client import build_async_client
from adapters.vsts.account import VstsAccountClient
from adapters.vsts.build import VstsBuildClient
from adapters.vsts.profile import VstsProfileClient
from adapters.vsts.project import VstsProjectClient
from core.config import AppSettings
from core.domain.capabilities import CapabilityKind
from core.domain.models import OAuthToken
from core.errors import InvalidArgumentError
from core.interfaces.connection import Connection, ConnectionFactory
from core.preconditions import require_token

logger = logging.getLogger(__name__)

CLIENT_REGISTRY: dict[CapabilityKind, Callable[[httpx.AsyncClient], Any]] = {
    CapabilityKind.PROFILE: VstsProfileClient,
    CapabilityKind.ACCOUNT: VstsAccountClient,
    CapabilityKind.PROJECT: VstsProjectClient,
    CapabilityKind.BUILD: VstsBuildClient,
}


class VstsConnection(Connection):
    """Conexión a un endpoint (global o de cuenta)."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http
        self._clients: dict[CapabilityKind, Any] = {}
        self.base_url = str(http.base_url).rstrip("/")

    def get_client(self, kind: CapabilityKind) -> Any:
        try:
            kind = CapabilityKind(kind)
        except ValueError:
            raise InvalidArgumentError("kind", f"Unknown capability kind: {kind!r}") from None

        client = self._clients.get(kind)
        if client is None:
            client = CLIENT_REGISTRY[kind](self._http)
            self._clients[kind] = client
        return client

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "VstsConnection":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class VstsConnectionFactory(ConnectionFactory):
    """Abre conexiones httpx a partir de un token."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def open(self, token: OAuthToken | None, base_url: str | None = None) -> VstsConnection:
        token = require_token(token)
        http = build_async_client(
            self._settings,
            base_url=base_url,
            token=token,
            transport=self._transport,
        )
        logger.debug("Opened connection to %s", http.base_url)
        return VstsConnection(http)
