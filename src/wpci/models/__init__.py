"""Pydantic models."""

from wpci.models.container import ContainerInfo, ContainerNetworkInfo, NetworkInfo, NetworkSettings
from wpci.models.inputs import ActionInputs
from wpci.models.run import RunResult, StageRecord

__all__ = [
    "ActionInputs",
    "ContainerInfo",
    "ContainerNetworkInfo",
    "NetworkInfo",
    "NetworkSettings",
    "RunResult",
    "StageRecord",
]
