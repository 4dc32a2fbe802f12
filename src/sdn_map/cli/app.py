"""Typer CLI root application with serve command."""

import typer

from sdn_map.core.config import get_settings
from sdn_map.core.logging import setup_logging

app = typer.Typer(name="sdn-map", help="Thai province lookup, health zones, and category colors")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "sdn_map.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from sdn_map.cli.boundaries_cmd import boundaries_app
    from sdn_map.cli.colors_cmd import color
    from sdn_map.cli.locate_cmd import locate
    from sdn_map.cli.zones_cmd import zones_app

    app.add_typer(zones_app, name="zones", help="Health-zone lookups")
    app.add_typer(boundaries_app, name="boundaries", help="Boundary dataset commands")
    app.command("locate")(locate)
    app.command("color")(color)


_register_subcommands()
