"""CLI module for resloc.

Inspect how locations resolve and read the resources they point at.
"""

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from resloc import get_loader
from resloc.resolution.paths import combine as combine_paths
from resloc.resolution.resources import ClassPathResource, Resource

app = typer.Typer(
    name="resloc",
    help="resloc - resolve classpath, URL and plain resource locations",
    add_completion=False,
)
console = Console()


def _resource_table(resources: List[Resource]) -> Table:
    table = Table(title="Resolved Resources", show_header=True, header_style="bold")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Path", style="magenta", no_wrap=True)
    table.add_column("Description", style="green")
    table.add_column("Context", style="dim")

    for resource in resources:
        context = ""
        if isinstance(resource, ClassPathResource):
            context = resource.context.description
        table.add_row(
            resource.kind.value,
            escape(resource.path),
            escape(resource.description),
            escape(context),
        )
    return table


@app.command()
def resolve(
    location: str = typer.Argument(..., help="Location to resolve"),
    relative: Optional[List[str]] = typer.Option(
        None, "--relative", "-r", help="Derive a relative resource (repeatable)"
    ),
) -> None:
    """Show how a location resolves, and optionally derived resources."""
    resource = get_loader().resolve(location)
    resources = [resource]
    for relative_path in relative or []:
        resources.append(resource.derive_relative(relative_path))
    console.print(_resource_table(resources))


@app.command()
def cat(
    location: str = typer.Argument(..., help="Location to read"),
) -> None:
    """Write the bytes of a resource to stdout."""
    resource = get_loader().resolve(location)
    try:
        data = resource.read_bytes()
    except (OSError, ValueError) as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    typer.echo(data, nl=False)


@app.command()
def combine(
    base: str = typer.Argument(..., help="Base resource path"),
    relative: str = typer.Argument(..., help="Relative path expression"),
) -> None:
    """Print the combination of a base path and a relative path."""
    typer.echo(combine_paths(base, relative))


if __name__ == "__main__":
    app()
