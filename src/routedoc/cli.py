"""CLI entry point for routedoc."""

import json
import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from routedoc.config import DocConfig, load_config
from routedoc.descriptor.base import RouteDescriptor
from routedoc.descriptor.loader import load_route_table
from routedoc.synth.document import synthesize


def _load_inputs(routes_path: Path, config_path: Path | None) -> tuple[list[RouteDescriptor], DocConfig]:
    """Load route table and config, turning validation errors into CLI errors."""
    try:
        routes = load_route_table(routes_path)
        config = load_config(config_path)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(str(e)) from e
    return routes, config


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Build Swagger 2.0 docs from route descriptors."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@main.command()
@click.argument("routes_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the swagger document.")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML documentation config.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def build(routes_path: Path, output: Path, config_path: Path | None, fmt: str):
    """Synthesize the swagger document for a route table."""
    click.echo(f"Loading routes from {routes_path}...")
    routes, config = _load_inputs(routes_path, config_path)
    click.echo(f"Found {len(routes)} routes.")

    document = synthesize(routes, config)

    if fmt == "yaml":
        text = yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(document, indent=2, ensure_ascii=False)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Documented {len(document['paths'])} paths, saved to {output}")


@main.command()
@click.argument("routes_path", type=click.Path(exists=True, path_type=Path))
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML documentation config.")
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", default=8000, type=int, help="Bind port.")
def serve(routes_path: Path, config_path: Path | None, host: str, port: int):
    """Serve the documentation UI for a route table."""
    import uvicorn
    from fastapi import FastAPI

    from routedoc.server import mount_docs

    routes, config = _load_inputs(routes_path, config_path)
    app = FastAPI(title=config.title or "routedoc", docs_url=None, redoc_url=None, openapi_url=None)
    mount_docs(app, routes, config)

    click.echo(f"Serving docs at http://{host}:{port}/{config.mount_path.strip('/')}/")
    uvicorn.run(app, host=host, port=port)
