"""Entry point: python -m restnames SPEC_FILE

Reads a Swagger/OpenAPI description, names every operation and writes a
Markdown naming manifest.
"""

from __future__ import annotations

import json
import logging

import click
import yaml

from .codegen import generate
from .config import NamingOptions
from .context_builder import build_context
from .errors import NamingError
from .loader import load_options, load_spec


@click.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", default="names.md", show_default=True, help="Manifest output path")
@click.option(
    "--verb-map",
    "verb_map_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON/YAML file mapping HTTP verbs to method prefixes",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every synthesized name")
def main(spec_path: str, output: str, verb_map_path: str | None, verbose: bool) -> None:
    """Infer model and method names for every operation in SPEC_PATH."""
    logging.basicConfig(format="%(message)s", level=logging.DEBUG if verbose else logging.INFO)

    try:
        options = load_options(verb_map_path) if verb_map_path else NamingOptions()
        spec = load_spec(spec_path)
    except (OSError, json.JSONDecodeError, yaml.YAMLError, NamingError) as e:
        raise click.ClickException(str(e)) from e

    context = build_context(spec, options)
    generate(context, output)

    if context["skipped"]:
        click.echo(f"Skipped {len(context['skipped'])} malformed paths", err=True)


if __name__ == "__main__":
    main()
