"""Commands for looking up and managing containers."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wpci.config import get_config
from wpci.errors import WpciError
from wpci.services import docker
from wpci.services.resolver import find_container_by_dns_name

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.command()
def find(
    match: str = typer.Argument(..., help="Substring of a DNS alias, e.g. the database host"),
) -> None:
    """Find the running container (and its network) whose DNS alias contains MATCH."""
    try:
        found = find_container_by_dns_name(match, docker.DockerRuntime())
    except WpciError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(exc.exit_code)

    table = Table(title=escape(f"Container matching {match!r}"))
    table.add_column("Network", style="cyan")
    table.add_column("DNS names")
    table.add_column("Container", style="yellow")
    table.add_row(
        escape(found.network_name),
        escape(", ".join(found.dns_names)),
        found.container_info.id[:12],
    )
    console.print(table)


@app.command()
def stop(
    name: Optional[str] = typer.Argument(None, help="Container name (default: configured name)"),
) -> None:
    """Stop and remove the WordPress CI container."""
    name = name or get_config().container_name
    try:
        docker.ensure_container_stopped(name)
    except WpciError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(exc.exit_code)
    console.print(f"[yellow]Container stopped: {escape(name)}[/yellow]")


@app.command()
def logs(
    name: Optional[str] = typer.Argument(None, help="Container name (default: configured name)"),
) -> None:
    """Show the container's logs."""
    name = name or get_config().container_name
    typer.echo(docker.container_logs(name), nl=False)
