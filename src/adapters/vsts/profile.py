"""Capacidad de perfil.

Endpoint global: `/_apis/profile/profiles/me`.
"""

from __future__ import annotations

import httpx

from adapters.http_client import get_json
from core.domain.models import Profile
from core.interfaces.connection import ProfileClient


class VstsProfileClient(ProfileClient):
    """Perfil del dueño del token."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def get_profile(self) -> Profile:
        payload = await get_json(self._http, "/_apis/profile/profiles/me")
        return Profile.model_validate(payload)
