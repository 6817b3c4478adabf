"""CLI principal (Typer).

Comandos:
- `pokemon NAME`: especie tal cual (o traducida con `--translated`).
- `doctor ...`: diagnósticos y configuración.

La CLI solo traduce errores del Core a mensajes/exit codes; no decide nada.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_pokemon_json, render_pokemon_json
from cli import doctor
from cli.ui_components import build_error_panel, build_pokemon_table, print_banner
from core.config import AppSettings
from core.domain.models import Pokemon
from core.errors import AppError, BadRequestError, NotFoundError
from core.logging_setup import configure_logging
from core.services.app_context import AppContext

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Pokemon descriptions, optionally Shakespeare/Yoda flavoured.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def exit_code_for(error: AppError) -> int:
    if isinstance(error, NotFoundError):
        return 2
    if isinstance(error, BadRequestError):
        return 3
    return 1


async def _lookup(settings: AppSettings, name: str, *, translated: bool) -> Pokemon:
    async with AppContext(settings=settings) as ctx:
        if translated:
            return await ctx.use_cases.get_pokemon_translated(name)
        return await ctx.use_cases.get_pokemon(name)


@app.command()
def pokemon(
    name: str = typer.Argument(..., help="Species name as known by PokeAPI (e.g. 'mewtwo')."),
    translated: bool = typer.Option(
        False,
        "--translated",
        "-t",
        help="Rewrite the description (Yoda for cave/legendary, Shakespeare otherwise).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the JSON to this file."),
    log_level: str | None = typer.Option(None, "--log-level", help="Override DEXLORE_LOG_LEVEL."),
) -> None:
    """Look up a Pokemon species."""

    settings = AppSettings()
    configure_logging(log_level or settings.log_level)

    try:
        result = asyncio.run(_lookup(settings, name, translated=translated))
    except AppError as exc:
        logger.error("Lookup for %s failed: %s", name, exc)
        if as_json:
            typer.echo(json.dumps(exc.to_payload(), ensure_ascii=False))
        else:
            _console.print(build_error_panel(exc))
        raise typer.Exit(code=exit_code_for(exc)) from exc

    if output is not None:
        export_pokemon_json(pokemon=result, output_path=output)

    if as_json:
        typer.echo(render_pokemon_json(result))
        return

    print_banner(_console)
    _console.print(build_pokemon_table(result, translated=translated))
    if output is not None:
        _console.print(f"[green]Saved JSON to:[/green] {output}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
