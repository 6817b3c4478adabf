"""Pokemon lookup and translation use cases.

This module owns the only decision logic of the application: which
translation style a species gets, and what happens when the translation
service fails. Catalog failures always reach the caller; translation
failures never do (the plain description is kept instead).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, TypeVar

from core.domain.models import Pokemon
from core.domain.translation import TranslationStyle
from core.errors import AppError, GenericError
from core.interfaces.repositories import PokemonRepository, TranslationRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


def select_style(pokemon: Pokemon) -> TranslationStyle:
    """Yoda for cave dwellers and legendaries, Shakespeare for everyone else."""

    if pokemon.is_cave() or pokemon.is_legendary:
        return TranslationStyle.YODA
    return TranslationStyle.SHAKESPEARE


class PokemonUseCases:
    """Entry points consumed by the CLI (or any other transport)."""

    def __init__(
        self,
        pokemon_repository: PokemonRepository,
        translation_repository: TranslationRepository,
        *,
        deadline_seconds: float | None = None,
    ) -> None:
        self._pokemon_repository = pokemon_repository
        self._translation_repository = translation_repository
        self._deadline_seconds = deadline_seconds

    async def _with_deadline(self, step: str, awaitable: Awaitable[T]) -> T:
        if self._deadline_seconds is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, timeout=self._deadline_seconds)
        except asyncio.TimeoutError as exc:
            raise GenericError(f"{step} timed out after {self._deadline_seconds}s") from exc

    async def get_pokemon(self, name: str) -> Pokemon:
        return await self._with_deadline(
            "Pokemon lookup", self._pokemon_repository.get_pokemon(name)
        )

    async def get_pokemon_translated(self, name: str) -> Pokemon:
        pokemon = await self.get_pokemon(name)

        style = select_style(pokemon)
        logger.debug("Using %s translation for %s", style.label(), pokemon.name)

        try:
            translation = await self._with_deadline(
                f"{style.label()} translation",
                self._translation_repository.translate(style, pokemon.description),
            )
        except AppError as exc:
            logger.warning(
                "Failed to translate %s description with %s, keeping the standard one: %s",
                pokemon.name,
                style.label(),
                exc,
            )
            return pokemon

        pokemon.set_translated_description(translation)
        return pokemon
