"""
Command-line entry point for the Sketchfab MCP server.

Resolves configuration once, configures logging on stderr (stdout carries
the MCP protocol) and serves the tools over stdio.
"""

import logging
import sys
from typing import Optional

import typer
from typing_extensions import Annotated

from . import __version__
from .auth import redact_token
from .config import load_config
from .server import create_server

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="sketchfab-mcp",
    help="Sketchfab MCP server - search, inspect and download 3D models over stdio",
    add_completion=False,
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sketchfab-mcp {__version__}")
        raise typer.Exit()


@app.command()
def main(
    api_key: Annotated[
        Optional[str],
        typer.Option("--api-key", help="Sketchfab API key (falls back to SKETCHFAB_API_KEY)"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level (default: INFO)"),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    """Run the Sketchfab MCP server on stdio."""
    config = load_config(api_key=api_key, log_level=log_level)
    configure_logging(config.log_level)

    if config.api_key:
        logger.info("Sketchfab API key provided (%s)", redact_token(config.api_key))
    else:
        logger.warning("No Sketchfab API key provided. Some functionality may be limited.")

    server = create_server(config)
    logger.info("MCP Server running on stdio")

    try:
        server.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Fatal error in main(): %s", e)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
