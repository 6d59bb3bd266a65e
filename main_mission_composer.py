"""Mini README: Entry point CLI for the mission composer.

Exposes a Typer CLI that starts the FastAPI service with configurable host,
port and production flags, plus a quick great-circle distance calculator for
checking waypoint spacing from the shell.
"""

from __future__ import annotations

import typer
import uvicorn

from missioncomposer.configuration import get_settings
from missioncomposer.geodesy import distance_meters
from missioncomposer.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch and manage the mission composer service.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the wildcard address.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting mission composer on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "missioncomposer.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def distance(
    lat1: float = typer.Option(..., help="Latitude of the first point (negative south of the equator)."),
    lon1: float = typer.Option(..., help="Longitude of the first point (negative west of Greenwich)."),
    lat2: float = typer.Option(..., help="Latitude of the second point (negative south of the equator)."),
    lon2: float = typer.Option(..., help="Longitude of the second point (negative west of Greenwich)."),
) -> None:
    """Print the haversine distance in metres between two points."""

    typer.echo(f"{distance_meters((lat1, lon1), (lat2, lon2)):.1f}")


if __name__ == "__main__":
    cli()
