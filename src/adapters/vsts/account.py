"""Capacidad de cuentas.

Endpoint global: `/_apis/accounts?memberId=<id>`.
"""

from __future__ import annotations

import httpx

from adapters.http_client import get_json, unwrap_collection
from core.domain.models import Account
from core.interfaces.connection import AccountClient


class VstsAccountClient(AccountClient):
    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def get_accounts_for_member(self, member_id: str) -> list[Account]:
        # Sin filtro por nombre: el orden es el que devuelve la plataforma.
        payload = await get_json(self._http, "/_apis/accounts", memberId=member_id)
        return [Account.model_validate(item) for item in unwrap_collection(payload)]
