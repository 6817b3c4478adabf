"""Extracción de texto a partir de registros de especie.

Funciones puras (sin I/O) usadas por el repositorio de PokeAPI:
- descripción en inglés normalizada
- hábitat legible a partir del slug
"""

from __future__ import annotations

from typing import Iterable, Protocol


# Literal escape markers first, then the real control characters.
_WHITESPACE_MARKERS: tuple[str, ...] = ("\\n", "\n", "\x0c", "\\f", "\r")


class _FlavorTextLike(Protocol):
    @property
    def text(self) -> str: ...

    @property
    def language_name(self) -> str: ...


def normalize_flavor_text(text: str) -> str:
    """Replace newline/form-feed/carriage-return markers with spaces and trim."""

    for marker in _WHITESPACE_MARKERS:
        text = text.replace(marker, " ")
    return text.strip()


def extract_english_description(entries: Iterable[_FlavorTextLike]) -> str | None:
    """First English flavor text, normalized; `None` if there is none."""

    for entry in entries:
        if entry.language_name == "en":
            return normalize_flavor_text(entry.text)
    return None


def format_habitat(slug: str | None) -> str | None:
    """`'rare-cave'` -> `'Rare Cave'`; `None` stays `None`."""

    if slug is None:
        return None
    words = slug.replace("-", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)
