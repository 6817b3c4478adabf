"""Cliente de PokeAPI (catálogo de especies).

- Un único intento por llamada (sin retries).
- Status no-2xx -> `NotFoundError`; red/decodificación -> `GenericError`.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.clients.dto import PokemonSpeciesDto
from core.errors import BadRequestError, GenericError, NotFoundError

logger = logging.getLogger(__name__)


class PokeApiClient:
    """Read-only access to `/pokemon-species/{name}/`.

    The `httpx.AsyncClient` is owned by the caller and shared across calls.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    async def pokemon_species(self, name: str) -> PokemonSpeciesDto:
        if not name or not name.strip():
            raise BadRequestError("Pokemon name must not be empty")

        path = f"/pokemon-species/{quote(name, safe='')}/"
        logger.debug("Fetching species %s from PokeAPI", name)

        try:
            response = await self._http.get(path)
        except httpx.HTTPError as exc:
            raise GenericError(f"Failed to fetch from PokeAPI: {exc}") from exc

        if not response.is_success:
            raise NotFoundError(f"Pokemon species '{name}' not found")

        try:
            return PokemonSpeciesDto.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise GenericError(f"Failed to parse PokeAPI response: {exc}") from exc
