
from __future__ import annotations

import logging
import sys

import typer

from config import Settings
from fastmcp_app import create_mcp


cli = typer.Typer(add_completion=False)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind (HTTP transport)."),
    port: int = typer.Option(None, help="Port to bind (HTTP transport)."),
    transport: str = typer.Option("stdio", help="Transport: 'stdio' or 'http'."),
    log_level: str = typer.Option(None, help="Logging level (DEBUG, INFO, WARNING, ERROR)."),
) -> None:
    """Start the documentation MCP server (defaults to stdio transport)."""

    if transport not in ("stdio", "http"):
        raise typer.BadParameter(f"unknown transport: {transport}", param_hint="--transport")

    settings = Settings.from_env()
    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    if log_level is not None:
        settings.log_level = log_level.upper()

    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    mcp = create_mcp(settings)
    if transport == "stdio":
        mcp.run()
    else:
        # Force JSON-style HTTP on /mcp (non-streaming)
        app = mcp.http_app(path="/mcp", transport="http", json_response=True, stateless_http=True)
        import uvicorn
        uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


@cli.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        run(host=None, port=None, transport="stdio", log_level=None)


if __name__ == "__main__":
    cli()
