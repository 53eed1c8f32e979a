"""Comprobaciones de precondición compartidas.

Por qué aquí:
- Las cuatro operaciones del servicio (y la factoría de conexiones) validan
  lo mismo; un único sitio evita divergencias en mensajes y tipos de error.
- Cada helper falla rápido con un error tipado; no acumula violaciones.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from core.domain.models import OAuthToken
from core.errors import InvalidArgumentError

T = TypeVar("T")


def require_token(token: OAuthToken | None, parameter: str = "token") -> OAuthToken:
    """Devuelve `token` si lleva un access token utilizable."""

    if token is None:
        raise InvalidArgumentError(parameter)
    if not (token.access_token or "").strip():
        raise InvalidArgumentError(parameter, f"Argument '{parameter}' has no access token.")
    return token


def require_name(value: str | None, parameter: str) -> str:
    """Devuelve `value` si es un nombre no vacío."""

    if value is None or not value.strip():
        raise InvalidArgumentError(parameter)
    return value


def match_by_name(items: Iterable[T], name: str, key: Callable[[T], str]) -> T | None:
    """Primer elemento cuyo nombre coincide exactamente, sin distinguir mayúsculas.

    No recorta espacios ni normaliza puntuación: "My Account " no coincide
    con "my account".
    """

    wanted = name.casefold()
    for item in items:
        if key(item).casefold() == wanted:
            return item
    return None
