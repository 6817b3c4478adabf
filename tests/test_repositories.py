"""Tests for adapters/repositories (PokeAPI and cached translations)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from adapters.cache.translation_cache import TranslationCache
from adapters.clients.dto import PokemonSpeciesDto
from adapters.repositories.pokemon_repository import PokeApiPokemonRepository
from adapters.repositories.translation_repository import CachedTranslationRepository, cache_key
from conftest import species_payload
from core.domain.models import DESCRIPTION_NOT_AVAILABLE
from core.domain.translation import TranslationStyle
from core.errors import BadRequestError, GenericError, NotFoundError
from core.interfaces.repositories import PokemonRepository, TranslationRepository


def _pokeapi_client_returning(payload: dict) -> MagicMock:
    client = MagicMock()
    client.pokemon_species = AsyncMock(return_value=PokemonSpeciesDto.model_validate(payload))
    return client


def _translations_client(result: str = "Translated") -> MagicMock:
    client = MagicMock()
    client.translate = AsyncMock(return_value=result)
    return client


class TestPokeApiPokemonRepository:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(PokeApiPokemonRepository(MagicMock()), PokemonRepository)

    @pytest.mark.asyncio
    async def test_maps_species_to_domain(self) -> None:
        client = _pokeapi_client_returning(
            species_payload(
                "onix",
                habitat="rare-cave",
                flavor_text_entries=[("de", "Deutsch"), ("en", "Rock\\nsnake.")],
            )
        )
        repo = PokeApiPokemonRepository(client)

        pokemon = await repo.get_pokemon("onix")

        client.pokemon_species.assert_awaited_once_with("onix")
        assert pokemon.name == "onix"
        assert pokemon.description == "Rock snake."
        assert pokemon.habitat == "Rare Cave"
        assert pokemon.is_legendary is False

    @pytest.mark.asyncio
    async def test_missing_description_and_habitat_use_sentinel(self) -> None:
        client = _pokeapi_client_returning(
            species_payload("mystery", habitat=None, flavor_text_entries=[("fr", "Texte")])
        )

        pokemon = await PokeApiPokemonRepository(client).get_pokemon("mystery")

        assert pokemon.description == DESCRIPTION_NOT_AVAILABLE
        assert pokemon.habitat == DESCRIPTION_NOT_AVAILABLE

    @pytest.mark.asyncio
    async def test_legendary_flag_is_carried(self) -> None:
        client = _pokeapi_client_returning(species_payload("lugia", is_legendary=True, habitat="sea"))

        pokemon = await PokeApiPokemonRepository(client).get_pokemon("lugia")

        assert pokemon.is_legendary is True
        assert pokemon.habitat == "Sea"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [NotFoundError("missing"), GenericError("boom")])
    async def test_client_errors_propagate(self, error) -> None:
        client = MagicMock()
        client.pokemon_species = AsyncMock(side_effect=error)

        with pytest.raises(type(error)):
            await PokeApiPokemonRepository(client).get_pokemon("x")


class TestCachedTranslationRepository:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(CachedTranslationRepository(MagicMock()), TranslationRepository)

    def test_cache_key_format(self) -> None:
        assert cache_key(TranslationStyle.YODA, "Hello there") == "yoda_Hello there"
        assert cache_key(TranslationStyle.SHAKESPEARE, "Hi") == "shakespeare_Hi"

    @pytest.mark.asyncio
    async def test_second_identical_call_hits_cache(self) -> None:
        client = _translations_client("Hello, it is")
        repo = CachedTranslationRepository(client)

        first = await repo.translate(TranslationStyle.YODA, "It is hello")
        second = await repo.translate(TranslationStyle.YODA, "It is hello")

        assert first == second == "Hello, it is"
        client.translate.assert_awaited_once_with(TranslationStyle.YODA, "It is hello")

    @pytest.mark.asyncio
    async def test_styles_are_cached_separately(self) -> None:
        client = _translations_client()
        repo = CachedTranslationRepository(client)

        await repo.shakespeare("same text")
        await repo.yoda("same text")

        assert client.translate.await_count == 2
        assert repo.cache.get("shakespeare_same text") == "Translated"
        assert repo.cache.get("yoda_same text") == "Translated"

    @pytest.mark.asyncio
    async def test_injected_entry_is_served_without_remote_call(self) -> None:
        client = _translations_client()
        cache = TranslationCache()
        cache.insert("shakespeare_Hello", "Good morrow")
        repo = CachedTranslationRepository(client, cache)

        assert await repo.translate(TranslationStyle.SHAKESPEARE, "Hello") == "Good morrow"
        client.translate.assert_not_awaited()

        assert repo.cache.pop("shakespeare_Hello") == "Good morrow"
        assert await repo.translate(TranslationStyle.SHAKESPEARE, "Hello") == "Translated"
        client.translate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failures_are_not_cached(self) -> None:
        client = MagicMock()
        client.translate = AsyncMock(side_effect=[BadRequestError("bad"), "Recovered"])
        repo = CachedTranslationRepository(client)

        with pytest.raises(BadRequestError):
            await repo.translate(TranslationStyle.YODA, "text")

        assert len(repo.cache) == 0
        assert await repo.translate(TranslationStyle.YODA, "text") == "Recovered"

    @pytest.mark.asyncio
    async def test_expired_entry_triggers_new_call(self) -> None:
        now = [0.0]
        cache = TranslationCache(ttl_seconds=300, clock=lambda: now[0])
        client = _translations_client()
        repo = CachedTranslationRepository(client, cache)

        await repo.translate(TranslationStyle.YODA, "text")
        now[0] = 301.0
        await repo.translate(TranslationStyle.YODA, "text")

        assert client.translate.await_count == 2
