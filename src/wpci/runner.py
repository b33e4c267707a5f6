"""The action pipeline: resolve network, start WordPress, wait, test, tear down."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from wpci.config import Settings
from wpci.errors import CommandError, InputError
from wpci.models import ActionInputs, ContainerNetworkInfo, RunResult
from wpci.services import docker, system
from wpci.services.http import RetryPolicy, wait_for_http_server
from wpci.services.resolver import find_container_by_dns_name
from wpci.services.run_args import DockerRunArgs
from wpci.services.wordpress import container_run_args
from wpci.stages import stage

log = logging.getLogger(__name__)


def _find_container(match_string: str) -> ContainerNetworkInfo:
    return find_container_by_dns_name(match_string, docker.DockerRuntime())


def _run_test_command(command: str, cwd: Path, env: dict[str, str]) -> system.CommandResult:
    return system.shell_exec(command, cwd=cwd, env=env)


def _show_container_logs(name: str) -> None:
    log.info(docker.container_logs(name))


@dataclass
class RunEnvironment:
    """Collaborators the pipeline calls out to; tests swap in fakes."""

    find_container: Callable[[str], ContainerNetworkInfo]
    ensure_container_running: Callable[[str, DockerRunArgs], object]
    ensure_container_stopped: Callable[[str], None]
    wait_for_http_server: Callable[[str, RetryPolicy], object]
    install_script: Callable[[Path, str], object]
    show_container_logs: Callable[[str], None]
    run_test_command: Callable[[str, Path, dict[str, str]], system.CommandResult]

    @classmethod
    def default(cls) -> RunEnvironment:
        return cls(
            find_container=_find_container,
            ensure_container_running=docker.ensure_container_running,
            ensure_container_stopped=docker.ensure_container_stopped,
            wait_for_http_server=wait_for_http_server,
            install_script=system.install_script,
            show_container_logs=_show_container_logs,
            run_test_command=_run_test_command,
        )


def resolve_network(inputs: ActionInputs, env: RunEnvironment) -> str:
    """Use the configured network, else the network of the database container."""
    if inputs.network:
        return inputs.network
    if not inputs.db_hostname:
        raise InputError("Either the network or the db-host input must be provided.")
    found = env.find_container(inputs.db_hostname)
    log.info(
        "Found %s on network %s (container %s)",
        inputs.db_hostname,
        found.network_name,
        found.container_info.id[:12],
    )
    return found.network_name


def _teardown(env: RunEnvironment, settings: Settings, result: RunResult) -> None:
    try:
        with stage("Stop the WordPress CI container", result.stages):
            env.ensure_container_stopped(settings.container_name)
    except Exception as exc:
        log.warning("Could not stop container %s: %s", settings.container_name, exc)


def run_action(
    inputs: ActionInputs,
    settings: Settings,
    env: Optional[RunEnvironment] = None,
) -> RunResult:
    """Run the whole pipeline. The container is always stopped before returning or raising."""
    env = env or RunEnvironment.default()
    start = time.monotonic()
    result = RunResult()

    with stage("Resolve container network", result.stages):
        network = resolve_network(inputs, env)
    run_args = container_run_args(inputs, settings, network)

    try:
        with stage("Start WordPress CI container", result.stages):
            log.info("Waiting for WordPress CI to be available at %s...", settings.url)
            try:
                env.ensure_container_running(inputs.image, run_args)
                env.wait_for_http_server(
                    settings.url,
                    RetryPolicy.from_millis(settings.wait_timeout_ms, settings.wait_interval_ms),
                )
            except Exception as exc:
                log.error("Error ensuring container is running: %s", exc)
                try:
                    env.show_container_logs(settings.container_name)
                except Exception as logs_exc:
                    log.warning("Could not read container logs: %s", logs_exc)
                raise

        with stage("Setup proxy script to run command in WordPress CI container", result.stages):
            env.install_script(
                settings.proxy_script_path,
                docker.proxied_command_script(settings.container_name),
            )

        if inputs.test_command:
            with stage("Test Command", result.stages):
                log.info("Running in %s: %s", inputs.test_command_context, inputs.test_command)
                try:
                    outcome = env.run_test_command(
                        inputs.test_command,
                        inputs.test_command_context,
                        {"WORDPRESS_CI_URL": settings.url},
                    )
                except CommandError as exc:
                    result.stdout, result.stderr = exc.stdout, exc.stderr
                    raise
                result.stdout, result.stderr = outcome.stdout, outcome.stderr
        else:
            log.info("No test command provided, skipping test execution.")
    finally:
        _teardown(env, settings, result)
        result.time_ms = int((time.monotonic() - start) * 1000)

    return result
