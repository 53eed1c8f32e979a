"""Capacidad de builds.

Endpoint acotado a la cuenta: `{account_uri}/{project_id}/_apis/build/definitions`.
El proyecto va por identidad interna, nunca por nombre.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx

from adapters.http_client import get_json, unwrap_collection
from core.domain.models import BuildDefinitionReference
from core.interfaces.connection import BuildClient


class VstsBuildClient(BuildClient):
    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

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
        ids = ",".join(str(i) for i in definition_ids) if definition_ids else None
        payload = await get_json(
            self._http,
            f"/{quote(project_id, safe='')}/_apis/build/definitions",
            name=name,
            definitionIds=ids,
            minMetricsTime=min_metrics_time,
            builtAfter=built_after,
            notBuiltAfter=not_built_after,
        )
        return [BuildDefinitionReference.model_validate(item) for item in unwrap_collection(payload)]
