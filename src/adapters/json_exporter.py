"""Exportación JSON de respuestas de la API.

Por qué JSON con nombres del cable:
- El fichero resultante es comparable 1:1 con lo que devuelve el vendor.
- Permite persistir perfiles/manifest para otras herramientas sin re-consultar.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from core.domain.models import BungieModel


def export_models_json(*, models: BungieModel | Sequence[BungieModel], output_path: Path) -> Path:
    """Exporta uno o varios modelos a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload: Any
    if isinstance(models, BungieModel):
        payload = models.to_wire()
    else:
        payload = [model.to_wire() for model in models]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
