"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers, auth y `api-version` para todas las capacidades.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.models import OAuthToken


def build_async_client(
    settings: AppSettings | None = None,
    *,
    base_url: str | None = None,
    token: OAuthToken | None = None,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults de la plataforma.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las capacidades se comporten igual.
    - Sin reintentos: el backoff pertenece al transporte, no a este facade.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if token is not None and token.access_token:
        headers["Authorization"] = f"Bearer {token.access_token}"
    if extra_headers:
        headers.update(extra_headers)

    return httpx.AsyncClient(
        base_url=(settings.global_base_url if base_url is None else base_url).rstrip("/"),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        params={"api-version": settings.api_version},
        transport=transport,
    )


async def get_json(client: httpx.AsyncClient, path: str, **params: object) -> object:
    """GET relativo al `base_url` del cliente; errores HTTP se propagan."""

    query = {k: v for k, v in params.items() if v is not None}
    response = await client.get(path, params=query)
    response.raise_for_status()
    return response.json()


def unwrap_collection(payload: object) -> list[object]:
    """Extrae la lista de un sobre `{"count": n, "value": [...]}`."""

    if isinstance(payload, dict):
        value = payload.get("value")
        if isinstance(value, list):
            return value
        raise ValueError("Collection response without a 'value' list.")
    if isinstance(payload, list):
        return payload
    raise ValueError(f"Unexpected collection payload type: {type(payload).__name__}")
