import typer
import uvicorn

from src.crudhub.runtime.context import get_config


def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (defaults to config, 5000)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    config = get_config()
    uvicorn.run(
        "src.crudhub.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        log_config=None,
    )
