"""Contratos de repositorios consumidos por los casos de uso.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Los casos de uso dependen de estas abstracciones; en tests se sustituyen
  por dobles sin tocar adaptadores HTTP.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Pokemon
from core.domain.translation import TranslationStyle


@runtime_checkable
class PokemonRepository(Protocol):
    """Source of canonical species data."""

    async def get_pokemon(self, name: str) -> Pokemon:
        """Return the species or raise `NotFoundError` / `GenericError`."""

        ...


@runtime_checkable
class TranslationRepository(Protocol):
    """Style transform over free text.

    Implementations raise `AppError` subclasses on failure; they never
    return the source text as a silent fallback.
    """

    async def translate(self, style: TranslationStyle, text: str) -> str:
        ...
