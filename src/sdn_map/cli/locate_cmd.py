"""Province lookup CLI command."""

import asyncio
from pathlib import Path

import typer


def locate(
    lat: float = typer.Argument(..., help="Latitude (-90 to 90)"),
    lng: float = typer.Argument(..., help="Longitude (-180 to 180)"),
    boundaries: Path | None = typer.Option(  # noqa: B008
        None,
        "--boundaries",
        "-b",
        help="Boundary GeoJSON (defaults to BOUNDARIES_PATH)",
        exists=True,
        dir_okay=False,
    ),
    cross_check: bool = typer.Option(  # noqa: FBT001
        False, "--cross-check", help="Also query the configured reverse geocoder"
    ),
) -> None:
    """Find the province containing a coordinate."""
    asyncio.run(_locate(lat, lng, boundaries, cross_check))


async def _locate(lat: float, lng: float, boundaries: Path | None, cross_check: bool) -> None:
    """Async implementation of province lookup."""
    from sdn_map.core.config import get_settings
    from sdn_map.lib.geocoder import get_reverse_geocoder
    from sdn_map.lib.locator import ProvinceLocator
    from sdn_map.main import load_locator
    from sdn_map.services.location_service import resolve_location

    settings = get_settings()
    try:
        if boundaries is not None:
            locator = ProvinceLocator.from_path(
                boundaries,
                name_property=settings.boundary_name_property,
                english_name_property=settings.boundary_english_name_property,
            )
        else:
            locator = load_locator(settings)
    except ValueError as e:
        typer.echo(f"Invalid boundary file: {e}", err=True)
        raise typer.Exit(code=1) from e

    geocoder = get_reverse_geocoder(settings) if cross_check else None
    location = await resolve_location(locator, lat, lng, geocoder, cross_check=cross_check)

    if not location.matched:
        typer.echo(f"No province found at {lat}, {lng}")
        raise typer.Exit(code=1)

    typer.echo(f"Province: {location.province}")
    if location.name_english:
        typer.echo(f"  English: {location.name_english}")
    typer.echo(f"  Zone:    {location.zone} ({location.zone_name})")
    typer.echo(f"  Source:  {location.source}")
    if location.remote_province is not None:
        typer.echo(f"  Remote:  {location.remote_province} (agrees: {location.agrees})")
