"""Container inspection models (subset of ``docker inspect`` output)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NetworkInfo(BaseModel):
    """One network attachment of a container."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dns_names: list[str] = Field(default_factory=list, alias="DNSNames")

    @field_validator("dns_names", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # Docker reports null for attachments without aliases (default bridge)
        return [] if value is None else value


class NetworkSettings(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    networks: dict[str, NetworkInfo] = Field(default_factory=dict, alias="Networks")

    @field_validator("networks", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class ContainerInfo(BaseModel):
    """A running container as reported by ``docker inspect``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="Id")
    network_settings: NetworkSettings = Field(
        default_factory=NetworkSettings, alias="NetworkSettings"
    )

    @property
    def networks(self) -> dict[str, NetworkInfo]:
        return self.network_settings.networks


class ContainerNetworkInfo(BaseModel):
    """A container together with the network attachment that matched a lookup."""

    model_config = ConfigDict(frozen=True)

    network_name: str
    dns_names: list[str]
    container_info: ContainerInfo
