"""Subprocess helpers: streamed command execution, bash scripts, script install."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
import tempfile
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Callable, Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from wpci.errors import CommandError

log = logging.getLogger(__name__)
console = Console(highlight=False)


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _pump(pipe: IO[str], sink: list[str], emit: Callable[[str], None] | None) -> None:
    with pipe:
        for line in iter(pipe.readline, ""):
            sink.append(line)
            if emit is not None:
                emit(line.rstrip("\n"))


def _write_raw(stream: IO[str], line: str) -> None:
    # unchanged: lines may carry workflow commands
    stream.write(line + "\n")
    stream.flush()


def _print_stdout(line: str) -> None:
    _write_raw(sys.stdout, line)


def _print_stderr(line: str) -> None:
    _write_raw(sys.stderr, line)


def run(
    cmd: Sequence[str],
    *,
    cwd: Path | str | None = None,
    env: Mapping[str, str] | None = None,
    echo: bool = False,
    log_stdout: bool = False,
    log_stderr: bool = True,
    check: bool = True,
) -> CommandResult:
    """Run ``cmd``, streaming its output while accumulating it.

    stdout and stderr are drained concurrently so a chatty stderr cannot stall
    a child blocked on a full stdout pipe. With ``check`` a non-zero exit
    raises CommandError carrying both streams.
    """
    cmd = [str(part) for part in cmd]
    if not cmd:
        raise CommandError("No command provided")
    cmd_str = " ".join(cmd)
    if echo:
        console.print(f"> [blue]{escape(cmd_str)}[/blue]", emoji=False, soft_wrap=True)
    log.debug("exec: %s (cwd=%s)", cmd_str, cwd or ".")

    child_env = None
    if env is not None:
        child_env = {**os.environ, **env}
    try:
        proc = subprocess.Popen(
            cmd,
            cwd=cwd,
            env=child_env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
        )
    except OSError as exc:
        raise CommandError(f"Command could not be started: {cmd_str}\n{exc}") from exc

    out: list[str] = []
    err: list[str] = []
    threads = [
        threading.Thread(
            target=_pump, args=(proc.stdout, out, _print_stdout if log_stdout else None)
        ),
        threading.Thread(
            target=_pump, args=(proc.stderr, err, _print_stderr if log_stderr else None)
        ),
    ]
    for t in threads:
        t.start()
    returncode = proc.wait()
    for t in threads:
        t.join()

    result = CommandResult(returncode, "".join(out), "".join(err))
    if check and not result.ok:
        raise CommandError(
            f"Command failed: {cmd_str}\nexit code: {returncode}\nstderr: {result.stderr}",
            returncode=returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result


def shell_exec(
    script: str,
    *,
    cwd: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    """Run ``script`` with ``bash -eu -o pipefail``, streaming both outputs."""
    fd, path = tempfile.mkstemp(prefix="wpci-script-", suffix=".sh")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(script)
        console.print(f"[bold]$[/bold] {escape(script)}", emoji=False, soft_wrap=True)
        return run(
            ["/bin/bash", "-eu", "-o", "pipefail", path],
            cwd=cwd,
            env=env,
            log_stdout=True,
            log_stderr=True,
        )
    finally:
        os.unlink(path)


def install_script(path: Path, content: str) -> bool:
    """Write an executable script unless ``path`` already exists.

    Returns True when the script was written.
    """
    path = Path(path)
    if path.exists():
        console.print(f"[magenta]Script {path} already exists, skipping installation.[/magenta]")
        return False
    console.print(f"[blue]Installing script to {path}...[/blue]")
    path.write_text(content)
    path.chmod(0o755)
    return True
