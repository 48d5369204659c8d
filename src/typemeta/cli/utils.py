"""Shared CLI helpers."""

from pathlib import Path
from typing import Any

import click

from typemeta.config.models import TypeMetaConfig
from typemeta.core.errors import TypeMetaError
from typemeta.inspector import TypeInspector
from typemeta.model.index import IndexView
from typemeta.model.parsing import parse_type_ref
from typemeta.model.snapshot import load_index
from typemeta.model.types import TypeRef


def build_inspector(obj: dict[str, Any], index_path: Path | None) -> TypeInspector:
    """Inspector from the CLI config, over a snapshot index when one is given."""
    config: TypeMetaConfig = obj["config"]
    index: IndexView | None = None
    if index_path is not None:
        try:
            index = load_index(index_path)
        except TypeMetaError as e:
            raise click.ClickException(str(e)) from e
    return TypeInspector.from_config(config, index)


def parse_type_argument(text: str) -> TypeRef:
    try:
        return parse_type_ref(text)
    except TypeMetaError as e:
        raise click.BadParameter(e.message) from e
