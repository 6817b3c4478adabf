"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.clients.funtranslations import API_SECRET_HEADER
from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings, url: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show effective configuration and check connectivity to both upstreams."""

    settings = AppSettings()

    table = Table(title="dexlore Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("PokeAPI base_url", "OK", settings.pokeapi_base_url)
    table.add_row("FunTranslations base_url", "OK", settings.funtranslations_base_url)
    if settings.funtranslations_api_secret:
        table.add_row("FunTranslations secret", "OK", f"Sent as {API_SECRET_HEADER}")
    else:
        table.add_row("FunTranslations secret", "OPTIONAL", "Public tier -> low hourly rate limit")
    table.add_row(
        "Translation cache",
        "OK",
        f"ttl={settings.translation_cache_ttl_seconds:g}s max={settings.translation_cache_max_entries}",
    )
    deadline = settings.request_deadline_seconds
    table.add_row("Request deadline", "OK", f"{deadline:g}s" if deadline else "disabled")

    # Connectivity (best-effort)
    for label, url in (
        ("PokeAPI connectivity", settings.pokeapi_base_url.rstrip("/") + "/pokemon-species/ditto/"),
        ("FunTranslations connectivity", settings.funtranslations_base_url),
    ):
        ok, detail = asyncio.run(_check_http(settings, url))
        table.add_row(label, "OK" if ok else "FAIL", detail)

    _console.print(table)


@app.command(name="setup-translations")
def setup_translations() -> None:
    """Store the FunTranslations API secret in the user config .env."""

    secret = typer.prompt("FunTranslations API secret", hide_input=True).strip()
    if not secret:
        raise typer.BadParameter("secret is required")

    env_path = write_user_env_vars({"DEXLORE_FUNTRANSLATIONS_API_SECRET": secret})
    _console.print(f"[green]Saved FunTranslations config to:[/green] {env_path}")
