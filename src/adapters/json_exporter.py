"""Exportación JSON de una especie.

Por qué JSON:
- Misma forma que la respuesta HTTP original (camelCase).
- Permite encadenar la CLI con otras herramientas (jq, pipelines).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import Pokemon


def pokemon_payload(pokemon: Pokemon) -> dict[str, Any]:
    return pokemon.model_dump(mode="json", by_alias=True)


def render_pokemon_json(pokemon: Pokemon) -> str:
    return json.dumps(pokemon_payload(pokemon), ensure_ascii=False, indent=2, sort_keys=True)


def export_pokemon_json(*, pokemon: Pokemon, output_path: Path) -> Path:
    """Exporta `Pokemon` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_pokemon_json(pokemon) + "\n", encoding="utf-8")
    return output_path
