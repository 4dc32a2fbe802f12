"""Category color CLI command."""

import typer

from sdn_map.lib.colors import color_for, color_for_name


def color(
    category_id: int | None = typer.Argument(None, help="Category id"),
    name: str | None = typer.Option(None, "--name", "-n", help="Category name, when no id is known"),
) -> None:
    """Print the color scheme of a category."""
    if category_id is None and not name:
        typer.echo("Provide a category id or --name", err=True)
        raise typer.Exit(code=2)

    scheme = color_for(category_id) if category_id is not None else color_for_name(name or "")
    typer.echo(f"id:      {scheme.id}")
    typer.echo(f"primary: {scheme.primary}")
    typer.echo(f"light:   {scheme.light}")
    typer.echo(f"dark:    {scheme.dark}")
