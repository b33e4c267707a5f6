"""The GitHub Action entry point."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from wpci import actions
from wpci.config import get_config
from wpci.errors import WpciError
from wpci.inputs import read_inputs
from wpci.models import RunResult
from wpci.runner import RunEnvironment, run_action

console = Console()


def _print_summary(result: RunResult) -> None:
    table = Table(title="WordPress CI")
    table.add_column("Stage", style="cyan")
    table.add_column("Result")
    table.add_column("Time (ms)", justify="right")
    for record in result.stages:
        style = "green" if record.result == "success" else "red"
        table.add_row(record.name, f"[{style}]{record.result}[/{style}]", str(record.duration_ms or 0))
    console.print(table)


def _publish(result: RunResult) -> None:
    actions.set_output("stdout", result.stdout)
    actions.set_output("stderr", result.stderr)
    actions.set_output("time", result.time_ms)


def run() -> None:
    """Start WordPress, run the test command against it, then tear it down."""
    cfg = get_config()
    actions.setup_logging(debug=cfg.debug)

    try:
        inputs = read_inputs()
        result = run_action(inputs, cfg, RunEnvironment.default())
    except WpciError as exc:
        actions.issue_command("error", str(exc))
        raise typer.Exit(exc.exit_code)

    _print_summary(result)
    _publish(result)
    console.print(f"[green bold]Done![/green bold] WordPress CI finished in {result.time_ms} ms")
