"""Modelos de respuesta de las APIs upstream.

Idea:
- Reflejan el JSON de PokeAPI/FunTranslations tal cual (snake_case upstream).
- `extra="ignore"`: PokeAPI añade campos con frecuencia y no queremos romper.
- Solo viven en adapters; el Core nunca ve estas clases.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from adapters.clients.species_text import extract_english_description, format_habitat


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NamedApiResource(_UpstreamModel):
    name: str
    url: str = ""


class ApiResource(_UpstreamModel):
    url: str = ""


class PokemonDexEntry(_UpstreamModel):
    entry_number: int
    pokedex: NamedApiResource


class Name(_UpstreamModel):
    name: str
    language: NamedApiResource


class FlavorText(_UpstreamModel):
    text: str = Field(..., alias="flavor_text")
    language: NamedApiResource
    version: NamedApiResource | None = None

    @property
    def language_name(self) -> str:
        return self.language.name


class Description(_UpstreamModel):
    description: str
    language: NamedApiResource


class Genus(_UpstreamModel):
    genus: str
    language: NamedApiResource


class PokemonVariety(_UpstreamModel):
    is_default: bool
    pokemon: NamedApiResource


class PokemonSpeciesDto(_UpstreamModel):
    """Respuesta de `GET /pokemon-species/{name}/`.

    Solo `name`, `is_legendary`, `flavor_text_entries` y `habitat` se
    interpretan; el resto se transporta sin uso.
    """

    id: int
    name: str = Field(..., min_length=1)
    is_legendary: bool = False
    is_mythical: bool = False
    is_baby: bool = False
    flavor_text_entries: list[FlavorText] = Field(default_factory=list)
    habitat: NamedApiResource | None = None

    order: int | None = None
    gender_rate: int | None = None
    capture_rate: int | None = None
    base_happiness: int | None = None
    hatch_counter: int | None = None
    has_gender_differences: bool | None = None
    forms_switchable: bool | None = None
    growth_rate: NamedApiResource | None = None
    pokedex_numbers: list[PokemonDexEntry] = Field(default_factory=list)
    egg_groups: list[NamedApiResource] = Field(default_factory=list)
    color: NamedApiResource | None = None
    shape: NamedApiResource | None = None
    evolves_from_species: NamedApiResource | None = None
    evolution_chain: ApiResource | None = None
    generation: NamedApiResource | None = None
    names: list[Name] = Field(default_factory=list)
    form_descriptions: list[Description] = Field(default_factory=list)
    genera: list[Genus] = Field(default_factory=list)
    varieties: list[PokemonVariety] = Field(default_factory=list)

    def english_description(self) -> str | None:
        return extract_english_description(self.flavor_text_entries)

    def habitat_label(self) -> str | None:
        return format_habitat(self.habitat.name if self.habitat else None)


class TranslationRequest(BaseModel):
    text: str


class TranslationContents(_UpstreamModel):
    translated: str
    text: str | None = None
    translation: str | None = None


class TranslationSuccess(_UpstreamModel):
    total: int


class TranslationResponse(_UpstreamModel):
    success: TranslationSuccess | None = None
    contents: TranslationContents
