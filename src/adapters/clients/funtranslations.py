"""Cliente de FunTranslations (Shakespeare / Yoda).

Mapeo de respuestas:
- 200 -> `contents.translated`
- 429 -> `GenericError` (rate limit; la API pública permite muy pocas llamadas/hora)
- 400 -> `BadRequestError`
- resto / red / JSON inválido -> `GenericError`
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from adapters.clients.dto import TranslationRequest, TranslationResponse
from core.domain.translation import TranslationStyle
from core.errors import BadRequestError, GenericError

logger = logging.getLogger(__name__)

API_SECRET_HEADER = "X-Funtranslations-Api-Secret"


class FunTranslationsClient:
    """POSTs free text to `/{style}.json` on a shared `httpx.AsyncClient`."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    async def translate(self, style: TranslationStyle, text: str) -> str:
        path = f"/{style.value}.json"
        body = TranslationRequest(text=text).model_dump()

        try:
            response = await self._http.post(path, json=body)
        except httpx.HTTPError as exc:
            raise GenericError(f"Failed to fetch from FunTranslations API: {exc}") from exc

        if response.status_code == httpx.codes.OK:
            try:
                payload = TranslationResponse.model_validate(response.json())
            except (ValueError, ValidationError) as exc:
                raise GenericError(f"Failed to parse FunTranslations response: {exc}") from exc
            logger.debug("Translated (%s): %s", style.value, payload.contents.translated)
            return payload.contents.translated

        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            raise GenericError("Rate limit exceeded for FunTranslations API")
        if response.status_code == httpx.codes.BAD_REQUEST:
            raise BadRequestError("Invalid request to FunTranslations API")
        raise GenericError(f"FunTranslations API error: {response.status_code}")

    async def shakespeare(self, text: str) -> str:
        return await self.translate(TranslationStyle.SHAKESPEARE, text)

    async def yoda(self, text: str) -> str:
        return await self.translate(TranslationStyle.YODA, text)
