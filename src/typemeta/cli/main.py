"""typemeta CLI - inspect schema classifications and subtype answers."""

from pathlib import Path

import click

from typemeta import __version__
from typemeta.cli.annotations import annotations_command
from typemeta.cli.classify import classify_command, formats_command
from typemeta.cli.is_a import is_a_command
from typemeta.config.loader import load_config
from typemeta.core.errors import TypeMetaError
from typemeta.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="typemeta")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Project config file (default: ./typemeta.yaml if present)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """typemeta - OpenAPI schema types for statically indexed Python types."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except TypeMetaError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


cli.add_command(classify_command, name="classify")
cli.add_command(formats_command, name="formats")
cli.add_command(is_a_command, name="is-a")
cli.add_command(annotations_command, name="annotations")


if __name__ == "__main__":
    cli()
