"""Repositorio de traducciones con cache read-through.

- Clave de cache: `"{style}_{texto}"`.
- Hit: se devuelve sin llamar a FunTranslations.
- Miss: llamada remota; solo los éxitos se guardan.
- Misses concurrentes de la misma clave no se deduplican (gana la última escritura).
"""

from __future__ import annotations

import logging

from adapters.cache.translation_cache import TranslationCache
from adapters.clients.funtranslations import FunTranslationsClient
from core.domain.translation import TranslationStyle
from core.interfaces.repositories import TranslationRepository

logger = logging.getLogger(__name__)


def cache_key(style: TranslationStyle, text: str) -> str:
    return f"{style.value}_{text}"


class CachedTranslationRepository(TranslationRepository):
    def __init__(self, client: FunTranslationsClient, cache: TranslationCache | None = None) -> None:
        self._client = client
        self._cache = cache if cache is not None else TranslationCache()

    @property
    def cache(self) -> TranslationCache:
        return self._cache

    async def translate(self, style: TranslationStyle, text: str) -> str:
        key = cache_key(style, text)

        cached = self._cache.get(key)
        if cached is not None:
            logger.info("%s translation cache hit", style.label())
            return cached

        logger.info("%s translation cache miss", style.label())
        translation = await self._client.translate(style, text)
        self._cache.insert(key, translation)
        return translation

    async def shakespeare(self, text: str) -> str:
        return await self.translate(TranslationStyle.SHAKESPEARE, text)

    async def yoda(self, text: str) -> str:
        return await self.translate(TranslationStyle.YODA, text)
