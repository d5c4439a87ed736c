"""CLI entry point for docs2openapi."""

from pathlib import Path

import click

from docs2openapi.config import ExtractorConfig, load_config
from docs2openapi.errors import ExtractionError
from docs2openapi.loader import load_document
from docs2openapi.log import setup_logging
from docs2openapi.openapi import build_document, write_document
from docs2openapi.parser.document import extract_document


def _apply_overrides(
    config: ExtractorConfig,
    schemas: str | None,
    title: str | None,
    api_version: str | None,
) -> ExtractorConfig:
    """CLI flags win over the config file."""
    info = config.info
    if title is not None:
        info = info.model_copy(update={"title": title})
    if api_version is not None:
        info = info.model_copy(update={"version": api_version})

    update = {"info": info}
    if schemas is not None:
        update["schema_sections"] = schemas
    return config.model_copy(update=update)


@click.group()
def main():
    """Rebuild an OpenAPI document from rendered API reference pages."""
    pass


@main.command()
@click.argument("source")
@click.option("-o", "--output", default="openapi-schema.json", show_default=True, type=click.Path(path_type=Path), help="Output file for the OpenAPI document.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML file overriding selectors and output settings.")
@click.option("--schemas", default=None, type=click.Choice(["all", "first"]), help="Which schema-definition sections to read.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format (auto uses the file suffix).")
@click.option("--title", default=None, help="Title for the info block.")
@click.option("--api-version", default=None, help="Version for the info block.")
@click.option("--headed", is_flag=True, help="Show the browser while rendering a URL.")
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug).")
def extract(
    source: str,
    output: Path,
    config_path: Path | None,
    schemas: str | None,
    fmt: str,
    title: str | None,
    api_version: str | None,
    headed: bool,
    verbose: int,
):
    """Extract an OpenAPI document from SOURCE (an HTML file or URL)."""
    setup_logging(["WARNING", "INFO", "DEBUG"][min(verbose, 2)])
    config = _apply_overrides(load_config(config_path), schemas, title, api_version)

    click.echo(f"Loading {source}...")
    root = load_document(source, wait_until=config.wait_until, timeout_ms=config.timeout_ms, headless=not headed)

    click.echo("Extracting API description...")
    try:
        model = extract_document(root, config)
    except ExtractionError as e:
        raise click.ClickException(str(e)) from e

    operation_count = sum(len(methods) for methods in model.paths.values())
    click.echo(f"Found {len(model.paths)} paths, {operation_count} operations, {len(model.schemas)} schemas.")

    write_document(build_document(model, config), output, fmt=fmt)
    click.echo(f"OpenAPI document saved to {output}")
