"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (PokeAPI/FunTranslations) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "dexlore"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "dexlore"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "dexlore"
    return Path.home() / ".config" / "dexlore"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# dexlore user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEXLORE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request HTTP (segundos).",
    )
    user_agent: str = Field(
        default="dexlore/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las APIs upstream.",
    )

    pokeapi_base_url: str = Field(
        default="https://pokeapi.co/api/v2",
        min_length=8,
        description="Base URL del catálogo de especies (PokeAPI).",
    )
    funtranslations_base_url: str = Field(
        default="https://api.funtranslations.com/translate",
        min_length=8,
        description="Base URL de FunTranslations (endpoints <style>.json).",
    )
    funtranslations_api_secret: str | None = Field(
        default=None,
        description="API secret opcional de FunTranslations (plan de pago).",
    )

    translation_cache_ttl_seconds: float = Field(
        default=300.0,
        gt=0,
        description="TTL de la cache de traducciones (segundos).",
    )
    translation_cache_max_entries: int = Field(
        default=1000,
        ge=1,
        description="Capacidad máxima de la cache de traducciones (LRU).",
    )

    request_deadline_seconds: float | None = Field(
        default=30.0,
        gt=0,
        description="Deadline por paso remoto en los casos de uso (None = sin deadline).",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para la CLI (DEBUG, INFO, WARNING...).",
    )
