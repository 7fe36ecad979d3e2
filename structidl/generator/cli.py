"""Command-line interface for structidl."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from structidl.generator import gostruct, parse, protobuf
from structidl.generator.errors import ParseError

if TYPE_CHECKING:
    from structidl.generator.types import FieldDesc, StructDesc


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Go struct to protobuf converter."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _load(input_file: str) -> list[StructDesc]:
    with open(input_file, encoding="utf-8") as f:
        source = f.read()

    try:
        return parse(source)
    except ParseError as e:
        message = escape(f"{input_file}: {e}")
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {message}", highlight=False)
        sys.exit(1)


@cli.command()
@click.option("--format", "-f", "output_format", required=True, help="Output format (go, proto)")
@click.option("--input", "-i", "input_file", required=True, help="Input Go source file")
@click.option("--output", "-o", "output_file", required=True, help="Output file")
@click.option("--package", "-p", default=None, help="Package name for the generated file")
def gen(output_format: str, input_file: str, output_file: str, package: str | None) -> None:
    """Convert struct definitions to another format."""
    structs = _load(input_file)

    if output_format == "go":
        generated_file = gostruct.render(structs, package=package)
    elif output_format == "proto":
        generated_file = protobuf.render(structs, package=package)
    else:
        print(f"Unknown format: {output_format}")
        sys.exit(1)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(generated_file)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input Go source file")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display the structs and fields found in a file."""
    structs = _load(input_file)

    if output_json:
        print(json.dumps([struct.to_dict() for struct in structs], indent=2))
    else:
        _output_plain(structs)


def _field_kind(field: FieldDesc) -> str:
    parts = []
    if field.is_slice:
        parts.append("slice")
    if field.is_pointer:
        parts.append("pointer")
    parts.append("primitive" if field.is_primitive else "named")
    return ", ".join(parts)


def _output_plain(structs: list[StructDesc]) -> None:
    """Output struct info using rich text formatting."""
    console = Console()

    for struct in structs:
        console.print(f"[bold cyan]{struct.name}[/bold cyan]")

        table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
        table.add_column("#", style="green", justify="right")
        table.add_column("Field", style="white")
        table.add_column("Go Type", style="yellow")
        table.add_column("Proto Type", style="yellow")
        table.add_column("Kind", style="dim")

        for number, field in enumerate(struct.fields, start=1):
            table.add_row(
                str(number),
                field.name,
                field.go_type,
                protobuf.canonical_type(field),
                _field_kind(field),
            )

        console.print(table)
        console.print()


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
