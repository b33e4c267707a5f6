"""Wait for an HTTP endpoint."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from wpci.config import get_config
from wpci.errors import ServerNotReadyError
from wpci.services.http import RetryPolicy, wait_for_http_server

console = Console()


def wait(
    url: Optional[str] = typer.Argument(None, help="URL to poll (default: configured WordPress URL)"),
    timeout_ms: Optional[int] = typer.Option(None, "--timeout-ms", min=0, help="Overall deadline in milliseconds"),
    interval_ms: Optional[int] = typer.Option(None, "--interval-ms", min=1, help="Pause between attempts"),
) -> None:
    """Block until URL answers with any HTTP status."""
    cfg = get_config()
    url = url or cfg.url
    policy = RetryPolicy.from_millis(
        cfg.wait_timeout_ms if timeout_ms is None else timeout_ms,
        cfg.wait_interval_ms if interval_ms is None else interval_ms,
    )
    try:
        status = wait_for_http_server(url, policy)
    except ServerNotReadyError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(exc.exit_code)
    console.print(f"[green]{escape(url)} is up (HTTP {status})[/green]")
