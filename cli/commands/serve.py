"""CLI command to start the HTTP API"""
from typing import Optional

import typer


def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Start the prompt API server"""
    import uvicorn

    from core.config import get_config

    config = get_config()
    host = host or config.api_host
    port = port or config.api_port

    typer.echo(f"Starting API server on http://{host}:{port}")
    typer.echo("Press Ctrl+C to stop the server")
    uvicorn.run("app.main:app", host=host, port=port, reload=reload, log_level=config.log_level.lower())
