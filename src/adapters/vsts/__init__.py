"""Adaptadores de la plataforma (VSTS / Azure DevOps REST).

Por qué un paquete:
- Agrupa un módulo por capacidad (perfil, cuentas, proyectos, builds).
- Cada cliente implementa su contrato de `core.interfaces.connection`.
"""

from adapters.vsts.account import VstsAccountClient
from adapters.vsts.build import VstsBuildClient
from adapters.vsts.connection import CLIENT_REGISTRY, VstsConnection, VstsConnectionFactory
from adapters.vsts.profile import VstsProfileClient
from adapters.vsts.project import VstsProjectClient

__all__ = [
    "CLIENT_REGISTRY",
    "VstsAccountClient",
    "VstsBuildClient",
    "VstsConnection",
    "VstsConnectionFactory",
    "VstsProfileClient",
    "VstsProjectClient",
]
