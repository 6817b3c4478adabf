"""Translation styles supported by the enrichment flow.

Kept in the domain layer so the use-case policy and the FunTranslations
adapter share a single source of truth for style names.
"""

from __future__ import annotations

from enum import Enum


class TranslationStyle(str, Enum):
    """Style transforms offered by the translation service."""

    SHAKESPEARE = "shakespeare"
    YODA = "yoda"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "Yoda" if self is TranslationStyle.YODA else "Shakespeare"
