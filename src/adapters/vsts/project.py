"""Capacidad de proyectos.

Endpoint acotado a la cuenta: `{account_uri}/_apis/projects`.
"""

from __future__ import annotations

import httpx

from adapters.http_client import get_json, unwrap_collection
from core.domain.models import TeamProjectReference
from core.interfaces.connection import ProjectClient


class VstsProjectClient(ProjectClient):
    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def get_projects(
        self,
        *,
        state_filter: str | None = None,
        top: int | None = None,
        skip: int | None = None,
    ) -> list[TeamProjectReference]:
        payload = await get_json(
            self._http,
            "/_apis/projects",
            stateFilter=state_filter,
            **{"$top": top, "$skip": skip},
        )
        return [TeamProjectReference.model_validate(item) for item in unwrap_collection(payload)]
