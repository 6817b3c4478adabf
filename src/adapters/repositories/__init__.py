"""Implementaciones concretas de los contratos de `core.interfaces`."""

from adapters.repositories.pokemon_repository import PokeApiPokemonRepository
from adapters.repositories.translation_repository import CachedTranslationRepository

__all__ = [
    "CachedTranslationRepository",
    "PokeApiPokemonRepository",
]
