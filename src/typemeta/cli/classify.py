"""typemeta classify / formats commands."""

import json
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from typemeta.cli.utils import parse_type_argument
from typemeta.config.models import TypeMetaConfig
from typemeta.inspector import TypeInspector
from typemeta.schema.formats import TypeWithFormat


def format_as_dict(fmt: TypeWithFormat) -> dict[str, str | None]:
    return {"type": fmt.schema_type.value, "format": fmt.format.format}


@click.command()
@click.argument("type_text", metavar="TYPE")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def classify_command(obj: dict[str, Any], type_text: str, as_json: bool) -> None:
    """Show the OpenAPI schema type and format for TYPE.

    TYPE is a dotted class name (decimal.Decimal), a primitive (int32),
    an array (list[str]) or a type variable (~T: numbers.Real).
    """
    config: TypeMetaConfig = obj["config"]
    type_ref = parse_type_argument(type_text)
    fmt = TypeInspector.from_config(config).classify(type_ref)
    if as_json:
        click.echo(json.dumps({"ref": str(type_ref), **format_as_dict(fmt)}))
    elif fmt.format.has_format:
        click.echo(f"{type_ref}: {fmt.schema_type.value} ({fmt.format.format})")
    else:
        click.echo(f"{type_ref}: {fmt.schema_type.value}")


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def formats_command(obj: dict[str, Any], as_json: bool) -> None:
    """List every type name with a known schema format."""
    config: TypeMetaConfig = obj["config"]
    table = TypeInspector.from_config(config).formats
    entries = sorted(table.items())

    if as_json:
        click.echo(json.dumps({name: format_as_dict(fmt) for name, fmt in entries}))
        return

    view = Table(box=None, padding=(0, 1), pad_edge=False)
    view.add_column("name", style="cyan")
    view.add_column("type", style="white")
    view.add_column("format", style="green")
    for name, fmt in entries:
        view.add_row(name, fmt.schema_type.value, fmt.format.format or "")
    Console().print(view)
