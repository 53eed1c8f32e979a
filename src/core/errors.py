"""Errores del Core.

Por qué una jerarquía propia:
- El llamador (bot/CLI) distingue argumentos inválidos de nombres inexistentes
  sin inspeccionar mensajes.
- Los fallos remotos (httpx) y la cancelación NO pasan por aquí: se propagan tal cual.
"""

from __future__ import annotations


class TsbotError(Exception):
    """Base de los errores propios del facade."""


class InvalidArgumentError(TsbotError, ValueError):
    """Un argumento requerido falta o está vacío."""

    def __init__(self, parameter: str, message: str | None = None) -> None:
        self.parameter = parameter
        super().__init__(message or f"Argument '{parameter}' is required and cannot be empty.")


class NameResolutionError(TsbotError, LookupError):
    """Un nombre no coincide con ningún registro remoto (fuera de rango)."""

    kind = "name"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No {self.kind} named '{name}' was found.")


class AccountNotFoundError(NameResolutionError):
    kind = "account"


class ProjectNotFoundError(NameResolutionError):
    kind = "project"
