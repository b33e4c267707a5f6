"""Proxy script commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from wpci.config import get_config
from wpci.services import docker, system

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.command()
def script(
    container: Optional[str] = typer.Option(None, help="Container name"),
    command: str = typer.Option("", help="Command to prefix the forwarded arguments with"),
) -> None:
    """Print the proxy script."""
    name = container or get_config().container_name
    typer.echo(docker.proxied_command_script(name, command), nl=False)


@app.command()
def install(
    path: Optional[Path] = typer.Option(None, help="Install location"),
    container: Optional[str] = typer.Option(None, help="Container name"),
) -> None:
    """Install the proxy script unless a file is already there."""
    cfg = get_config()
    target = path or cfg.proxy_script_path
    try:
        system.install_script(target, docker.proxied_command_script(container or cfg.container_name))
    except OSError as exc:
        console.print(f"[red]Could not install {target}: {escape(str(exc))}[/red]")
        raise typer.Exit(1)
