#!/usr/bin/env python3
"""
Main CLI entry point for schemaorg-ld.

Renders JSON-LD documents from YAML/JSON entity descriptions and lists
the available schema.org types.
"""

import logging
from typing import Optional

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from schemaorg_ld import __version__
from schemaorg_ld.common import setup_logging, translate_attribute_name
from schemaorg_ld.config import ConfigLoader, SchemaOrgConfig
from schemaorg_ld.loader import load_file
from schemaorg_ld.registry import Registry, UnknownSchemaTypeError
from schemaorg_ld.serialization.jsonld import to_json, to_script_tag

# Initialize Rich console for pretty output
console = Console(stderr=True)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="schemaorg-ld")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Path to configuration file"
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output"
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress output except errors"
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], verbose: bool, quiet: bool):
    """
    schemaorg-ld - schema.org JSON-LD for web pages

    Build structured metadata documents from YAML or JSON descriptions.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config

    if quiet:
        ctx.obj["log_level"] = logging.ERROR
    elif verbose:
        ctx.obj["log_level"] = logging.DEBUG
    else:
        ctx.obj["log_level"] = logging.WARNING
    setup_logging(ctx.obj["log_level"])


def _settings(ctx: click.Context) -> SchemaOrgConfig:
    return ConfigLoader().load_config(SchemaOrgConfig, ctx.obj.get("config_path"))


@cli.command("render")
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option("--pretty/--compact", default=None, help="JSON formatting (default from configuration)")
@click.option("--script/--no-script", default=False, help="Wrap in a JSON-LD <script> element")
@click.option("--nested", is_flag=True, help="Omit the @context declaration")
@click.pass_context
def render_cmd(ctx: click.Context, document: str, pretty: Optional[bool], script: bool, nested: bool):
    """Render DOCUMENT (.yaml, .yml or .json) as JSON-LD."""
    try:
        if pretty is None:
            pretty = _settings(ctx).pretty
        entity = load_file(document)
    except (ValidationError, UnknownSchemaTypeError, ValueError, FileNotFoundError, yaml.YAMLError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        ctx.exit(1)

    logger.info("Rendering %s from %s", entity.type_name(), document)
    if script:
        output = to_script_tag(entity, pretty=pretty, as_root=not nested)
    else:
        output = to_json(entity, pretty=pretty, as_root=not nested)
    click.echo(output)


@cli.command("types")
def types_cmd():
    """List the registered schema.org types."""
    table = Table(title="Registered Types")
    table.add_column("Type", style="cyan")
    table.add_column("Attributes", style="green")

    entries = Registry.entries()
    for name, entity_type in entries:
        keys = [translate_attribute_name(field_name) for field_name, field in entity_type.model_fields.items()
                if not field.exclude]
        table.add_row(name, ", ".join(keys))

    Console().print(table)
    click.echo(f"Number of types: {len(entries)}")


if __name__ == "__main__":
    cli()
