"""Repositorio de especies respaldado por PokeAPI.

Implementa `core.interfaces.PokemonRepository`: traduce el DTO ancho de
PokeAPI al modelo `Pokemon` del dominio.
"""

from __future__ import annotations

from adapters.clients.pokeapi import PokeApiClient
from core.domain.models import DESCRIPTION_NOT_AVAILABLE, Pokemon
from core.interfaces.repositories import PokemonRepository


class PokeApiPokemonRepository(PokemonRepository):
    def __init__(self, client: PokeApiClient) -> None:
        self._client = client

    async def get_pokemon(self, name: str) -> Pokemon:
        species = await self._client.pokemon_species(name)
        description = species.english_description()
        habitat = species.habitat_label()
        return Pokemon(
            name=species.name,
            description=DESCRIPTION_NOT_AVAILABLE if description is None else description,
            habitat=DESCRIPTION_NOT_AVAILABLE if habitat is None else habitat,
            is_legendary=species.is_legendary,
        )
