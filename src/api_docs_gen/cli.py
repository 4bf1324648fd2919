"""CLI entry point for api-docs-gen."""

import logging
from pathlib import Path

import click
from click.core import ParameterSource

from api_docs_gen.config import DocsSettings, get_settings
from api_docs_gen.errors import DocsGenError
from api_docs_gen.generator.docs import DocsGenerator, write_files
from api_docs_gen.parser.openapi import parse_document
from api_docs_gen.parser.source import acquire_spec, load_spec
from api_docs_gen.site.layout import base_options, write_layout

logger = logging.getLogger(__name__)


def _settings(**overrides) -> DocsSettings:
    """Settings with CLI options that were actually given applied on top."""
    update = {k: v for k, v in overrides.items() if v is not None}
    return get_settings().model_copy(update=update)


def _given(ctx: click.Context, name: str, value):
    """The option value if it was passed on the command line, else None."""
    if ctx.get_parameter_source(name) == ParameterSource.COMMANDLINE:
        return value
    return None


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """API Docs Gen: build documentation pages from an OpenAPI spec."""
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("source", type=click.Path(path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Canonical spec path (default: openapi.json).")
def fetch(source: Path, output: Path | None):
    """Copy or convert a spec into the canonical openapi.json."""
    settings = _settings(spec_path=output)
    try:
        doc = acquire_spec(source, settings.spec_path)
    except DocsGenError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Copied spec from {source} to {settings.spec_path} ({len(doc.get('paths') or {})} paths)")


@main.command()
@click.argument("source", required=False, type=click.Path(path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output directory for generated pages.")
@click.option("--spec-dest", default=None, type=click.Path(path_type=Path), help="Canonical spec path (default: openapi.json).")
@click.option("--base-url", default=None, help="URL prefix of the generated pages.")
@click.option("--title", default=None, help="Navigation title of the API section.")
@click.option("--schemas/--no-schemas", "include_schemas", default=True, help="Generate the schema reference page (default: from settings).")
@click.pass_context
def generate(ctx: click.Context, source: Path | None, output: Path | None, spec_dest: Path | None, base_url: str | None, title: str | None, include_schemas: bool):
    """Full pipeline: acquire spec -> generate pages -> write files."""
    settings = _settings(
        spec_source=source,
        spec_path=spec_dest,
        output_dir=output,
        base_url=base_url,
        title=title,
        include_schemas=_given(ctx, "include_schemas", include_schemas),
    )

    try:
        # Step 1: Acquire
        if settings.spec_source:
            click.echo(f"Reading spec from {settings.spec_source}...")
            doc = acquire_spec(settings.spec_source, settings.spec_path)
            click.echo(f"  Copied spec to {settings.spec_path}")
        else:
            click.echo(f"Reading spec from {settings.spec_path}...")
            doc = load_spec(settings.spec_path)

        # Step 2: Generate
        document = parse_document(doc)
        click.echo(f"Found {len(document.operations)} operations and {len(document.schemas)} schemas.")
        files = DocsGenerator(settings).generate(document)
    except DocsGenError as exc:
        raise click.ClickException(str(exc)) from exc

    # Step 3: Write
    try:
        written = write_files(settings.output_dir, files)
    except OSError as exc:
        raise click.ClickException(f"Cannot write output to {settings.output_dir}: {exc}") from exc
    for file_path in written:
        logger.debug("Wrote %s", file_path)
    click.echo(f"Generation complete! Wrote {len(files)} files to {settings.output_dir}")


@main.command()
@click.option("-o", "--output", default="layout.json", type=click.Path(path_type=Path), help="Layout options file.")
@click.option("--site-title", default=None, help="Title shown in the navigation bar.")
@click.option("--logo", default=None, help="Branding image path, e.g. /logo.png.")
def layout(output: Path, site_title: str | None, logo: str | None):
    """Write the site-wide layout options for the docs front-end."""
    settings = _settings(site_title=site_title, logo=logo)
    write_layout(output, base_options(settings))
    click.echo(f"Layout options saved to {output}")
