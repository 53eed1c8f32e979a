"""Exportación JSON de resultados.

Por qué JSON:
- Interoperabilidad con el bot y otros pipelines (`tsbot ... --json`).
- Formato estable: claves ordenadas y alias camelCase como los de la plataforma.
"""

from __future__ import annotations

import json
from typing import Sequence

from pydantic import BaseModel


def dump_models_json(models: BaseModel | Sequence[BaseModel]) -> str:
    """Serializa un modelo (o lista) a JSON UTF-8 con formato estable."""

    if isinstance(models, BaseModel):
        payload: object = models.model_dump(mode="json", by_alias=True)
    else:
        payload = [m.model_dump(mode="json", by_alias=True) for m in models]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
