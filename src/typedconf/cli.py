"""CLI do typedconf: comandos show / get / check."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from typedconf.core.errors import AccessError, LayerKindConflictError, ParseError
from typedconf.core.export import dump_store
from typedconf.core.layering import load_layered
from typedconf.core.parser import ConfigParser
from typedconf.core.types import ArgKind

DEFAULT_CONFIG_FILE = Path("config.txt")

EXIT_PARSE_ERROR = 1
EXIT_ACCESS_ERROR = 2

app = typer.Typer(name="typedconf", help="Leitor de configuração tipada orientada a linha")
console = Console()


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"
    TABLE = "table"


class KindOption(str, Enum):
    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


_KIND_OPTIONS = {
    KindOption.STR: ArgKind.STRING,
    KindOption.INT: ArgKind.INTEGER,
    KindOption.FLOAT: ArgKind.FLOAT,
    KindOption.BOOL: ArgKind.BOOLEAN,
}


def _print(message: str, style: str) -> None:
    # conteúdo do arquivo pode conter markup do rich; imprime literalmente em uma linha
    console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)


def _load(path: Path, local: Optional[Path] = None) -> ConfigParser:
    """Faz o parse de um arquivo (opcionalmente em camadas); em falha, imprime o erro e encerra."""
    try:
        if local is not None:
            return load_layered(path, local)
        return ConfigParser().parse(path)
    except (ParseError, LayerKindConflictError) as exc:
        _print(f"Error: {exc}", "bold red")
        if exc.hint:
            _print(f"Hint: {exc.hint}", "yellow")
        raise typer.Exit(code=EXIT_PARSE_ERROR)


def _print_events(events: List[Dict[str, Any]]) -> None:
    table = Table(title="Parse events")
    table.add_column("Level", style="cyan")
    table.add_column("Line")
    table.add_column("Message", max_width=80)

    for event in events:
        table.add_row(event["level"], str(event.get("line_no", "")), event["message"])

    console.print(table)


def _print_table(parser: ConfigParser) -> None:
    table = Table(title=f"Configuration: {parser.source}")
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="green")
    table.add_column("Value")

    for name, entry in parser.to_dict().items():
        table.add_row(name, entry["kind"], repr(entry["value"]))

    console.print(table)


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


@app.command()
def show(
    path: Path = typer.Argument(DEFAULT_CONFIG_FILE, help="Arquivo de configuração"),
    local: Optional[Path] = typer.Option(None, "--local", help="Arquivo local opcional de override"),
    fmt: OutputFormat = typer.Option(OutputFormat.YAML, "--format", "-f", help="Formato de saída"),
    show_hash: bool = typer.Option(False, "--hash", help="Imprime o hash do store"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Imprime o log de eventos do parse"),
) -> None:
    """Faz o parse de um arquivo de configuração e imprime o store resultante."""
    parser = _load(path, local)

    if verbose:
        _print_events(parser.events)

    for warning in parser.warnings:
        _print(f"Warning: {warning}", "yellow")

    if fmt is OutputFormat.TABLE:
        _print_table(parser)
    else:
        typer.echo(dump_store(parser, fmt.value), nl=False)

    if show_hash:
        typer.echo(f"hash: {parser.store_hash}")


@app.command()
def get(
    path: Path = typer.Argument(..., help="Arquivo de configuração"),
    name: str = typer.Argument(..., help="Nome do argumento"),
    kind: KindOption = typer.Option(KindOption.STR, "--kind", "-k", help="Tipo esperado"),
) -> None:
    """Imprime um único valor tipado."""
    parser = _load(path)
    try:
        value = parser.get(name, _KIND_OPTIONS[kind])
    except AccessError as exc:
        _print(f"Error: {exc}", "bold red")
        raise typer.Exit(code=EXIT_ACCESS_ERROR)

    typer.echo(_format_value(value))


@app.command()
def check(
    path: Path = typer.Argument(DEFAULT_CONFIG_FILE, help="Arquivo de configuração"),
) -> None:
    """Valida um arquivo de configuração sem imprimir seus valores."""
    parser = _load(path)
    typer.echo(f"OK: {len(parser)} argument(s) in {parser.source}")
    for warning in parser.warnings:
        typer.echo(f"Warning: {warning}")


if __name__ == "__main__":
    app()
