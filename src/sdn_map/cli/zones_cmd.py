"""Health-zone CLI commands."""

import typer

from sdn_map.lib.zones import (
    DEFAULT_CLASSIFIER,
    HealthZone,
    all_zones,
    zone_color,
    zone_display_name,
)

zones_app = typer.Typer()


@zones_app.command("list")
def list_zones() -> None:
    """List all zones with province counts."""
    for row in DEFAULT_CLASSIFIER.summary():
        typer.echo(f"{row.id:<16} {row.name:<12} {row.province_count:>3} provinces  {row.color}")


@zones_app.command("show")
def show_zone(zone: str = typer.Argument(..., help="Zone id, e.g. north-upper")) -> None:
    """List the provinces of one zone."""
    try:
        zone_id = HealthZone(zone)
    except ValueError:
        valid = ", ".join(all_zones())
        typer.echo(f"Unknown zone: {zone}. Valid zones: {valid}", err=True)
        raise typer.Exit(code=2) from None

    provinces = DEFAULT_CLASSIFIER.provinces_in_zone(zone_id)
    typer.echo(f"{zone_id} ({zone_display_name(zone_id)}) {zone_color(zone_id)}: {len(provinces)} provinces")
    for name in provinces:
        typer.echo(f"  {name}")


@zones_app.command("of")
def zone_of_province(province: str = typer.Argument(..., help="Thai province name")) -> None:
    """Show the zone of a province."""
    assignment = DEFAULT_CLASSIFIER.classify(province.strip())
    suffix = " (not in zone table, default)" if assignment.is_fallback else ""
    typer.echo(f"{assignment.province}: {assignment.zone} ({zone_display_name(assignment.zone)}){suffix}")
