"""Typed builder for ``docker run`` arguments.

Arguments are handed to docker as an argv list, never through a shell, so
values are validated here rather than quoted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from wpci.errors import InvalidRunOptionError

_ENV_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class EnvVar:
    key: str
    value: str

    def __post_init__(self) -> None:
        if not _ENV_KEY.match(self.key):
            raise InvalidRunOptionError(f"Invalid environment variable name: {self.key!r}")
        if "\n" in self.value or "\0" in self.value:
            raise InvalidRunOptionError(f"Environment value for {self.key} contains a newline or NUL")

    def to_arg(self) -> str:
        return f"--env={self.key}={self.value}"


@dataclass(frozen=True)
class Mount:
    source: str
    destination: str

    def __post_init__(self) -> None:
        if not self.source:
            raise InvalidRunOptionError("Mount source must not be empty")
        if ":" in self.source:
            raise InvalidRunOptionError(f"Mount source may not contain ':': {self.source!r}")
        if not PurePosixPath(self.destination).is_absolute():
            raise InvalidRunOptionError(
                f"Mount destination must be an absolute path: {self.destination!r}"
            )
        if ":" in self.destination:
            raise InvalidRunOptionError(
                f"Mount destination may not contain ':': {self.destination!r}"
            )

    def to_arg(self) -> str:
        return f"--volume={self.source}:{self.destination}"


@dataclass
class DockerRunArgs:
    """Accumulates ``docker run`` options; ``build()`` emits the argv slice.

    Emission order is fixed: detach, name, publish, network, then env and
    volume options in the order they were added.
    """

    name: str = ""
    network: str = ""
    publish: str = ""
    detach: bool = True
    _options: list[EnvVar | Mount] = field(default_factory=list, repr=False)

    def env(self, key: str, value: str) -> DockerRunArgs:
        self._options.append(EnvVar(key, value))
        return self

    def volume(self, source: str, destination: str) -> DockerRunArgs:
        self._options.append(Mount(source, destination))
        return self

    @property
    def env_vars(self) -> list[EnvVar]:
        return [o for o in self._options if isinstance(o, EnvVar)]

    @property
    def mounts(self) -> list[Mount]:
        return [o for o in self._options if isinstance(o, Mount)]

    def options(self) -> list[str]:
        """Only the env/volume options, in insertion order."""
        return [o.to_arg() for o in self._options]

    def build(self) -> list[str]:
        args: list[str] = []
        if self.detach:
            args.append("--detach")
        if self.name:
            args.append(f"--name={self.name}")
        if self.publish:
            args.append(f"--publish={self.publish}")
        if self.network:
            args.append(f"--network={self.network}")
        args.extend(self.options())
        return args
