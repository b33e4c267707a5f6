"""Docker CLI subprocess wrappers."""

from __future__ import annotations

import logging
import shlex
from typing import Sequence

from wpci.errors import CommandError, DockerError
from wpci.services import system
from wpci.services.run_args import DockerRunArgs

log = logging.getLogger(__name__)


def _run(cmd: list[str], *, check: bool = True, echo: bool = False) -> system.CommandResult:
    try:
        return system.run(cmd, check=check, echo=echo)
    except CommandError as exc:
        raise DockerError(
            f"Command failed: {' '.join(cmd)}\nstderr: {exc.stderr or exc}"
        ) from exc


def list_running_ids() -> list[str]:
    """Return ids of all running containers (``docker ps -q``)."""
    result = _run(["docker", "ps", "-q"])
    return [line.strip() for line in result.stdout.strip().splitlines() if line.strip()]


def inspect(ids: Sequence[str]) -> str:
    """Return the raw JSON array ``docker inspect`` prints for ``ids``.

    The CLI refuses an inspect without arguments, so an empty id list is
    answered with an empty array directly.
    """
    if not ids:
        return "[]"
    return _run(["docker", "inspect", *ids]).stdout


class DockerRuntime:
    """Container runtime backed by the local docker CLI."""

    def list_running_ids(self) -> list[str]:
        return list_running_ids()

    def inspect(self, ids: Sequence[str]) -> str:
        return inspect(ids)


def container_running(name: str) -> bool:
    result = _run(["docker", "ps", "--quiet", "--filter", f"name=^{name}$"])
    log.debug("docker ps result: %s", result.stdout.strip())
    return result.stdout.strip() != ""


def ensure_container_running(image: str, args: DockerRunArgs) -> system.CommandResult | None:
    """Start ``image`` in the background unless a container of that name runs."""
    log.debug("Ensuring container %s (%s) is running...", args.name, image)
    if args.name and container_running(args.name):
        log.info("Container %s is already running.", args.name)
        return None
    log.debug("Container %s is not running. Starting it...", args.name)
    return _run(["docker", "run", *args.build(), image], echo=True)


def ensure_container_stopped(name: str) -> None:
    """Stop and remove the container."""
    _run(["docker", "container", "stop", name], echo=True)
    _run(["docker", "container", "rm", name], echo=True)


def container_logs(name: str) -> str:
    """Return combined stdout/stderr of ``docker logs``."""
    result = _run(["docker", "logs", name], check=False)
    return result.stdout + result.stderr


def proxied_command_script(container_name: str, container_command: str = "") -> str:
    """Bash script that forwards its arguments into the container via ``docker exec``."""
    target = shlex.quote(container_name)
    if container_command:
        target += " " + container_command
    return (
        "#!/bin/bash\n"
        "\n"
        f'docker exec -i {target} "$@"\n'
        "\n"
        "exit $?\n"
    )
