"""GitHub Actions runner I/O: inputs, outputs, log groups and workflow commands.

Inputs arrive as ``INPUT_<NAME>`` environment variables, outputs go to the file
named by ``$GITHUB_OUTPUT``, and log annotations are ``::command::`` lines on
stdout.
"""

from __future__ import annotations

import logging
import os
import sys
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Mapping, TextIO

from wpci.errors import InputError

_TRUE = ("true", "True", "TRUE")
_FALSE = ("false", "False", "FALSE")


def _input_env_names(name: str) -> list[str]:
    primary = "INPUT_" + name.replace(" ", "_").upper()
    fallback = primary.replace("-", "_")
    return [primary] if fallback == primary else [primary, fallback]


def get_input(
    name: str, *, required: bool = False, env: Mapping[str, str] | None = None
) -> str:
    """Return the trimmed value of an action input ("" when unset)."""
    env = os.environ if env is None else env
    value = ""
    for key in _input_env_names(name):
        if key in env:
            value = env[key]
            break
    value = value.strip()
    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")
    return value


def get_boolean_input(
    name: str, *, default: bool = False, env: Mapping[str, str] | None = None
) -> bool:
    """Parse a YAML 1.2 "core schema" boolean input."""
    value = get_input(name, env=env)
    if value == "":
        return default
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InputError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def issue_command(
    command: str,
    message: str = "",
    properties: Mapping[str, str] | None = None,
    *,
    stream: TextIO | None = None,
) -> None:
    """Print a ``::command props::message`` workflow command."""
    stream = sys.stdout if stream is None else stream
    props = ""
    if properties:
        props = " " + ",".join(f"{k}={_escape_property(v)}" for k, v in properties.items())
    stream.write(f"::{command}{props}::{_escape_data(message)}\n")
    stream.flush()


def set_secret(secret: str) -> None:
    """Mask a value in all later log output."""
    if secret:
        issue_command("add-mask", secret)


def set_output(name: str, value: object, *, env: Mapping[str, str] | None = None) -> None:
    """Publish an action output."""
    env = os.environ if env is None else env
    text = str(value)
    output_file = env.get("GITHUB_OUTPUT", "")
    if not output_file:
        issue_command("set-output", text, {"name": name})
        return
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(Path(output_file), "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")


@contextmanager
def group(title: str) -> Generator[None, None, None]:
    """Fold everything logged inside the block under ``title``."""
    issue_command("group", title)
    try:
        yield
    finally:
        issue_command("endgroup")


def is_debug(env: Mapping[str, str] | None = None) -> bool:
    env = os.environ if env is None else env
    return env.get("RUNNER_DEBUG") == "1"


class WorkflowCommandHandler(logging.Handler):
    """Render log records as workflow commands the runner understands."""

    _COMMANDS = {
        logging.DEBUG: "debug",
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def __init__(self, stream: TextIO | None = None):
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            stream = self.stream or sys.stdout
            command = self._COMMANDS.get(record.levelno)
            if command is None:
                stream.write(message + "\n")
                stream.flush()
            else:
                issue_command(command, message, stream=stream)
        except Exception:
            self.handleError(record)


def setup_logging(debug: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Route the ``wpci`` logger through workflow commands."""
    logger = logging.getLogger("wpci")
    for handler in list(logger.handlers):
        if isinstance(handler, WorkflowCommandHandler):
            logger.removeHandler(handler)
    handler = WorkflowCommandHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug or is_debug() else logging.INFO)
    logger.propagate = False
    return logger
