"""Clientes HTTP de las APIs upstream (PokeAPI, FunTranslations)."""

from adapters.clients.funtranslations import FunTranslationsClient
from adapters.clients.pokeapi import PokeApiClient

__all__ = [
    "FunTranslationsClient",
    "PokeApiClient",
]
