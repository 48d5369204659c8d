"""typemeta annotations command - show annotations recorded in a snapshot."""

import json
from pathlib import Path
from typing import Any

import click

from typemeta.cli.utils import build_inspector
from typemeta.model.annotations import AnnotationInstance
from typemeta.model.targets import AnnotationTarget


def _jsonable(value: Any) -> Any:
    if isinstance(value, AnnotationInstance):
        return {"name": value.name, "values": {k: _jsonable(v) for k, v in value.values.items()}}
    if isinstance(value, tuple):
        return [_jsonable(v) for v in value]
    return value


@click.command()
@click.argument("index_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("class_name")
@click.option("--member", default=None, help="Field or method of the class")
@click.option("--param", "position", type=int, default=None, help="Parameter position of --member")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def annotations_command(
    obj: dict[str, Any],
    index_path: Path,
    class_name: str,
    member: str | None,
    position: int | None,
    as_json: bool,
) -> None:
    """List annotations on CLASS_NAME, or on one of its members.

    INDEX_PATH is a YAML index snapshot.
    """
    inspector = build_inspector(obj, index_path)
    info = inspector.index.lookup(class_name)
    if info is None:
        raise click.ClickException(f"{class_name} is not in the index")

    target: AnnotationTarget
    if member is None:
        if position is not None:
            raise click.UsageError("--param requires --member")
        target = info
    elif (field_info := info.get_field(member)) is not None and position is None:
        target = field_info
    elif (method := info.get_method(member)) is not None:
        if position is None:
            target = method
        elif 0 <= position < len(method.parameter_types):
            target = method.parameter(position)
        else:
            raise click.ClickException(f"{class_name}.{member} has no parameter {position}")
    else:
        raise click.ClickException(f"{class_name} has no member {member}")

    found = inspector.annotations_of(target)
    if as_json:
        click.echo(json.dumps([_jsonable(a) for a in found]))
        return
    if not found:
        click.echo("No annotations")
        return
    for annotation in found:
        values = ", ".join(f"{k}={v!r}" for k, v in annotation.values.items())
        click.echo(f"@{annotation.name}({values})")
