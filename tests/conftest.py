"""Shared test fixtures."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

import pytest

from wpci.config import Settings


class FakeRuntime:
    """In-memory container runtime recording the calls the resolver makes."""

    def __init__(self, containers: list[dict[str, Any]], raw: str | None = None):
        self.containers = containers
        self.raw = raw
        self.inspect_calls: list[list[str]] = []

    def list_running_ids(self) -> list[str]:
        return [c["Id"] for c in self.containers]

    def inspect(self, ids: Sequence[str]) -> str:
        self.inspect_calls.append(list(ids))
        if self.raw is not None:
            return self.raw
        return json.dumps([c for c in self.containers if c["Id"] in ids])


def container(cid: str, networks: dict[str, list[str] | None]) -> dict[str, Any]:
    return {
        "Id": cid,
        "Name": f"/{cid}",
        "NetworkSettings": {
            "Networks": {name: {"DNSNames": aliases} for name, aliases in networks.items()}
        },
    }


@pytest.fixture
def make_runtime():
    return FakeRuntime


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Return Settings pointing at temp locations with a short wait."""
    return Settings(
        proxy_script_path=tmp_path / "wpci-cmd",
        wait_timeout_ms=100,
        wait_interval_ms=10,
    )


@pytest.fixture(autouse=True)
def _reset_wpci_logger():
    logger = logging.getLogger("wpci")
    yield
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
