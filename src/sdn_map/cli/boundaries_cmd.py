"""Boundary dataset CLI commands."""

from pathlib import Path

import typer

from sdn_map.lib.zones import DEFAULT_CLASSIFIER

boundaries_app = typer.Typer()


@boundaries_app.command("check")
def check_boundaries(
    file: Path = typer.Argument(..., help="Path to boundary GeoJSON", exists=True, dir_okay=False),  # noqa: B008
) -> None:
    """Load a boundary dataset and report what would be served."""
    from sdn_map.core.config import get_settings
    from sdn_map.lib.boundary_loader import load_boundaries

    settings = get_settings()
    try:
        features = load_boundaries(
            file,
            name_property=settings.boundary_name_property,
            english_name_property=settings.boundary_english_name_property,
        )
    except ValueError as e:
        typer.echo(f"Invalid boundary file: {e}", err=True)
        raise typer.Exit(code=1) from e

    if not features:
        typer.echo("No usable province features found", err=True)
        raise typer.Exit(code=1)

    polygons = sum(len(f.geometry.geoms) for f in features)
    unzoned = [f.name_local for f in features if DEFAULT_CLASSIFIER.classify(f.name_local).is_fallback]

    typer.echo(f"Features:  {len(features)}")
    typer.echo(f"Polygons:  {polygons}")
    typer.echo(f"Unzoned:   {len(unzoned)}")
    for name in unzoned:
        typer.echo(f"  {name} (defaults to central)")
