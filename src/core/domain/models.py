"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en la construcción sin acoplar el Core a librerías de I/O.
- Serialización directa para la CLI (JSON camelCase) sin DTOs extra.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


DESCRIPTION_NOT_AVAILABLE = "Description not available"


class Pokemon(BaseModel):
    """Species returned to callers of the use cases.

    `description` starts as the catalog text and is overwritten at most once
    by the translation step.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre de la especie tal y como lo devuelve el catálogo.",
    )
    description: str = Field(
        ...,
        description="Descripción en inglés (original o traducida).",
    )
    habitat: str = Field(
        default=DESCRIPTION_NOT_AVAILABLE,
        description="Hábitat legible (p.ej. 'Rare Cave') o el centinela.",
    )
    is_legendary: bool = Field(
        default=False,
        description="Indica si la especie es legendaria.",
    )

    def is_cave(self) -> bool:
        # Exact match on the derived label.
        return self.habitat == "cave"

    def set_translated_description(self, new_description: str) -> None:
        self.description = new_description
