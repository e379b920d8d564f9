"""``mcpsample serve`` — run the HTTP API server."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from mcpsample.cli_commands._output import console


@click.command()
@click.option("--host", default=None, help="Interface to bind (default 127.0.0.1).")
@click.option("--port", type=int, default=None, help="Port to listen on (default 5202).")
@click.option(
    "--resources-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding sample.txt and data.json.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML settings file.",
)
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, ...).")
@click.option("--telemetry", is_flag=True, help="Export OpenTelemetry spans.")
def serve(
    host: str | None,
    port: int | None,
    resources_dir: Path | None,
    config_path: Path | None,
    log_level: str | None,
    telemetry: bool,
) -> None:
    """Serve the MCP API over HTTP."""
    import uvicorn

    from mcpsample.server.app import create_app
    from mcpsample.server.config import ConfigError, load_settings
    from mcpsample.utils.telemetry import configure_telemetry

    try:
        settings = load_settings(
            config_path,
            host=host,
            port=port,
            resources_dir=resources_dir,
            log_level=log_level,
        )
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if telemetry:
        settings.telemetry.enabled = True
    if settings.telemetry.enabled:
        configure_telemetry(otlp_endpoint=settings.telemetry.otlp_endpoint)

    console.print(f"Serving MCP API on http://{settings.host}:{settings.port}/api/mcp")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
