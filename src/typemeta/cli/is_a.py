"""typemeta is-a command - answer a subtype question."""

import json
import sys
from pathlib import Path
from typing import Any

import click

from typemeta.cli.utils import build_inspector, parse_type_argument


@click.command()
@click.argument("subject")
@click.argument("target")
@click.option(
    "--index",
    "index_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML index snapshot to consult before the runtime",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def is_a_command(
    obj: dict[str, Any], subject: str, target: str, index_path: Path | None, as_json: bool
) -> None:
    """Test whether SUBJECT is a subtype of TARGET.

    Exits with status 1 when it is not.
    """
    subject_ref = parse_type_argument(subject)
    target_ref = parse_type_argument(target)
    answer = build_inspector(obj, index_path).is_a(subject_ref, target_ref)

    if as_json:
        click.echo(json.dumps({"subject": subject, "target": target, "is_a": answer}))
    else:
        click.echo(f"{subject_ref} {'is a' if answer else 'is not a'} {target_ref}")
    if not answer:
        sys.exit(1)
