"""Shared fixtures: PokeAPI payloads and mocked HTTP transports."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings


def species_payload(
    name: str = "onix",
    *,
    is_legendary: bool = False,
    habitat: str | None = "cave",
    flavor_text_entries: list[tuple[str, str]] | None = None,
) -> dict[str, Any]:
    """Minimal-but-realistic `/pokemon-species/{name}/` body."""

    if flavor_text_entries is None:
        flavor_text_entries = [("en", "As it grows,\nthe stone\fportions harden.")]
    return {
        "id": 95,
        "name": name,
        "order": 125,
        "gender_rate": 4,
        "capture_rate": 45,
        "base_happiness": 50,
        "is_baby": False,
        "is_legendary": is_legendary,
        "is_mythical": False,
        "hatch_counter": 25,
        "has_gender_differences": False,
        "forms_switchable": False,
        "growth_rate": {"name": "medium", "url": "https://pokeapi.co/api/v2/growth-rate/2/"},
        "pokedex_numbers": [
            {"entry_number": 95, "pokedex": {"name": "national", "url": "https://pokeapi.co/api/v2/pokedex/1/"}}
        ],
        "egg_groups": [{"name": "mineral", "url": "https://pokeapi.co/api/v2/egg-group/10/"}],
        "color": {"name": "gray", "url": "https://pokeapi.co/api/v2/pokemon-color/4/"},
        "shape": {"name": "squiggle", "url": "https://pokeapi.co/api/v2/pokemon-shape/2/"},
        "evolves_from_species": None,
        "evolution_chain": {"url": "https://pokeapi.co/api/v2/evolution-chain/43/"},
        "habitat": (
            {"name": habitat, "url": "https://pokeapi.co/api/v2/pokemon-habitat/1/"} if habitat else None
        ),
        "generation": {"name": "generation-i", "url": "https://pokeapi.co/api/v2/generation/1/"},
        "names": [{"name": name.title(), "language": {"name": "en", "url": ""}}],
        "flavor_text_entries": [
            {
                "flavor_text": text,
                "language": {"name": lang, "url": ""},
                "version": {"name": "red", "url": ""},
            }
            for lang, text in flavor_text_entries
        ],
        "form_descriptions": [],
        "genera": [{"genus": "Rock Snake Pokémon", "language": {"name": "en", "url": ""}}],
        "varieties": [{"is_default": True, "pokemon": {"name": name, "url": ""}}],
    }


def translation_payload(translated: str, text: str = "", style: str = "yoda") -> dict[str, Any]:
    return {
        "success": {"total": 1},
        "contents": {"translated": translated, "text": text, "translation": style},
    }


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        pokeapi_base_url="https://pokeapi.test/api/v2",
        funtranslations_base_url="https://funtranslations.test/translate",
        request_deadline_seconds=5.0,
    )


@pytest.fixture
def make_async_client() -> Callable[..., httpx.AsyncClient]:
    clients: list[httpx.AsyncClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], base_url: str) -> httpx.AsyncClient:
        client = httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    return _make
