"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- La API REST de la plataforma devuelve camelCase; los alias permiten validar
  el JSON tal cual y exponer snake_case al resto del código.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- `extra="ignore"`: la plataforma añade campos con frecuencia y no queremos
  romper la validación por ello.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class OAuthToken(BaseModel):
    """Credencial opaca emitida fuera de este servicio.

    Solo se interpreta la presencia de `access_token`.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    access_token: str | None = Field(
        default=None,
        alias="AccessToken",
        description="Bearer token enviado en el header Authorization.",
    )
    token_type: str = Field(
        default="bearer",
        alias="TokenType",
        description="Tipo de token (siempre 'bearer' en la práctica).",
    )
    expires_in: int | None = Field(
        default=None,
        alias="ExpiresIn",
        ge=0,
        description="Segundos de validez restantes según el emisor.",
    )
    refresh_token: str | None = Field(
        default=None,
        alias="RefreshToken",
        description="Refresh token (no se usa aquí, se conserva para el llamador).",
    )


class Profile(BaseModel):
    """Perfil del usuario autenticado."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Identidad del miembro (clave para descubrir cuentas).",
    )
    display_name: str | None = Field(default=None, alias="displayName")
    email_address: str | None = Field(default=None, alias="emailAddress")
    public_alias: str | None = Field(default=None, alias="publicAlias")
    time_stamp: datetime | None = Field(default=None, alias="timeStamp")


class Account(BaseModel):
    """Cuenta (organización) a la que pertenece un miembro."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    account_id: str = Field(..., alias="accountId")
    account_name: str = Field(
        ...,
        alias="accountName",
        min_length=1,
        description="Nombre legible; se compara sin distinguir mayúsculas.",
    )
    account_uri: str = Field(
        ...,
        alias="accountUri",
        min_length=1,
        description="Base URI con la que se abren conexiones de proyecto/build.",
    )
    organization_name: str | None = Field(default=None, alias="organizationName")
    account_status: str | None = Field(default=None, alias="accountStatus")


class TeamProjectReference(BaseModel):
    """Referencia a un team project dentro de una cuenta."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., min_length=1, description="Identidad interna del proyecto.")
    name: str = Field(..., min_length=1)
    description: str | None = None
    url: str | None = None
    state: str | None = None
    revision: int | None = None
    visibility: str | None = None


class BuildDefinitionReference(BaseModel):
    """Referencia a una definición de build de un proyecto."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    name: str
    path: str | None = None
    revision: int | None = None
    url: str | None = None
    type: str | None = None
    queue_status: str | None = Field(default=None, alias="queueStatus")
    project: TeamProjectReference | None = None
