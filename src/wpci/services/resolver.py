"""Find a running container by scanning the DNS aliases of its network attachments."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from pydantic import TypeAdapter, ValidationError

from wpci.errors import ContainerNotFoundError, InspectParseError
from wpci.models import ContainerInfo, ContainerNetworkInfo

log = logging.getLogger(__name__)

_CONTAINER_LIST = TypeAdapter(list[ContainerInfo])


class ContainerRuntime(Protocol):
    def list_running_ids(self) -> list[str]: ...

    def inspect(self, ids: Sequence[str]) -> str: ...


def parse_inspect_output(raw: str) -> list[ContainerInfo]:
    """Parse a ``docker inspect`` JSON array, keeping the runtime's order."""
    try:
        return _CONTAINER_LIST.validate_json(raw)
    except ValidationError as exc:
        raise InspectParseError(f"Malformed docker inspect output: {exc}") from exc


def find_container_by_dns_name(
    match_string: str, runtime: ContainerRuntime
) -> ContainerNetworkInfo:
    """Return the first attachment whose DNS alias list contains ``match_string``.

    Containers are scanned in inspect order, then network entries, then
    aliases; matching is plain case-sensitive substring containment. The
    inspect call is issued even when nothing is running.
    """
    ids = runtime.list_running_ids()
    containers = parse_inspect_output(runtime.inspect(ids))
    log.debug("scanning %d container(s) for DNS name %r", len(containers), match_string)

    for container in containers:
        for network_name, network in container.networks.items():
            for dns_name in network.dns_names:
                if match_string in dns_name:
                    return ContainerNetworkInfo(
                        network_name=network_name,
                        dns_names=list(network.dns_names),
                        container_info=container,
                    )

    raise ContainerNotFoundError(f"No container found with DNS name matching: {match_string}")
