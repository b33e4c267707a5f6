"""Root Typer application for the wpci CLI."""

from __future__ import annotations

import typer

from wpci.commands import action, container, proxy, wait

app = typer.Typer(
    name="wpci",
    help="WordPress CI: run tests against a disposable WordPress container.",
    no_args_is_help=True,
)

app.command(name="run")(action.run)
app.command(name="wait")(wait.wait)
app.add_typer(container.app, name="container", help="Inspect and manage the WordPress CI container.")
app.add_typer(proxy.app, name="proxy", help="Proxy script that runs commands inside the container.")

if __name__ == "__main__":
    app()
