"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.repositories import PokemonRepository, TranslationRepository

__all__ = ["PokemonRepository", "TranslationRepository"]
