"""Custom exceptions for wpci."""

from __future__ import annotations


class WpciError(Exception):
    """Base exception for all wpci operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class DockerError(WpciError):
    """Docker CLI could not be reached or a docker command failed."""


class InspectParseError(WpciError):
    """``docker inspect`` output was not well-formed."""


class ContainerNotFoundError(WpciError):
    """No container found matching criteria."""


class InputError(WpciError):
    """An action input is missing or invalid."""


class InvalidRunOptionError(WpciError):
    """A ``docker run`` option was rejected by the argument builder."""


class ServerNotReadyError(WpciError):
    """The HTTP endpoint did not answer before the deadline."""


class CommandError(WpciError):
    """A command exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
        exit_code: int = 1,
    ):
        super().__init__(message, exit_code=exit_code)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
