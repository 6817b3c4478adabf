"""Application wiring.

Builds the object graph (HTTP clients -> API clients -> repositories ->
use cases) once per process and owns the shared `httpx.AsyncClient`
instances, so entry-points only deal with `PokemonUseCases`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType

import httpx

from adapters.cache.translation_cache import TranslationCache
from adapters.clients.funtranslations import API_SECRET_HEADER, FunTranslationsClient
from adapters.clients.pokeapi import PokeApiClient
from adapters.http_client import build_async_client
from adapters.repositories.pokemon_repository import PokeApiPokemonRepository
from adapters.repositories.translation_repository import CachedTranslationRepository
from core.config import AppSettings
from core.services.pokemon_use_cases import PokemonUseCases


@dataclass
class AppContext:
    """Async context manager exposing `use_cases` while the clients are open.

    `pokeapi_transport` / `funtranslations_transport` let tests plug an
    `httpx.MockTransport` without touching the network.
    """

    settings: AppSettings = field(default_factory=AppSettings)
    pokeapi_transport: httpx.AsyncBaseTransport | None = None
    funtranslations_transport: httpx.AsyncBaseTransport | None = None

    _pokeapi_http: httpx.AsyncClient | None = field(default=None, init=False, repr=False)
    _translations_http: httpx.AsyncClient | None = field(default=None, init=False, repr=False)
    _use_cases: PokemonUseCases | None = field(default=None, init=False, repr=False)
    _cache: TranslationCache | None = field(default=None, init=False, repr=False)

    @property
    def use_cases(self) -> PokemonUseCases:
        if self._use_cases is None:
            raise RuntimeError("AppContext is not open; use `async with AppContext(...)`")
        return self._use_cases

    @property
    def translation_cache(self) -> TranslationCache | None:
        return self._cache

    async def __aenter__(self) -> AppContext:
        settings = self.settings

        translation_headers: dict[str, str] = {}
        if settings.funtranslations_api_secret:
            translation_headers[API_SECRET_HEADER] = settings.funtranslations_api_secret

        self._pokeapi_http = build_async_client(
            settings,
            base_url=settings.pokeapi_base_url,
            transport=self.pokeapi_transport,
        )
        self._translations_http = build_async_client(
            settings,
            base_url=settings.funtranslations_base_url,
            extra_headers=translation_headers,
            transport=self.funtranslations_transport,
        )
        self._cache = TranslationCache(
            ttl_seconds=settings.translation_cache_ttl_seconds,
            max_entries=settings.translation_cache_max_entries,
        )

        self._use_cases = PokemonUseCases(
            PokeApiPokemonRepository(PokeApiClient(self._pokeapi_http)),
            CachedTranslationRepository(FunTranslationsClient(self._translations_http), self._cache),
            deadline_seconds=settings.request_deadline_seconds,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        for client in (self._pokeapi_http, self._translations_http):
            if client is not None:
                await client.aclose()
        self._pokeapi_http = None
        self._translations_http = None
        self._use_cases = None
