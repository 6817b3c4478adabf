"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `pokemon` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Pokemon
from core.errors import AppError


def print_banner(console: Console) -> None:
    """Imprime el banner (se omite en modo `--json`)."""

    title = Text("DEXLORE", style="bold cyan")
    subtitle = Text("PokeAPI • FunTranslations • Shakespeare & Yoda", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_pokemon_table(pokemon: Pokemon, *, translated: bool = False) -> Table:
    title = "Pokemon (translated)" if translated else "Pokemon"
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Name", pokemon.name)
    table.add_row("Habitat", pokemon.habitat)
    table.add_row("Legendary", "yes" if pokemon.is_legendary else "no")
    table.add_row("Description", pokemon.description)
    return table


def build_error_panel(error: AppError) -> Panel:
    body = Text(error.message)
    return Panel(body, title=Text(error.code, style="bold red"), border_style="red")
