"""Typer CLI root application with serve command."""

import typer

from provincial_admin.core.config import get_settings
from provincial_admin.core.logging import setup_logging

app = typer.Typer(name="provincial-admin", help="Provincial officials and circulars administration CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("127.0.0.1", "--host", help="Bind host"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "provincial_admin.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from provincial_admin.cli.db_cmd import db_app
    from provincial_admin.cli.officials_cmd import officials_app

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(officials_app, name="officials", help="Provincial official records")


_register_subcommands()
