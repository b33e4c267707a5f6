"""Run result models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StageRecord(BaseModel):
    """Outcome of one pipeline stage."""

    name: str
    result: str = "success"
    error: str | None = None
    duration_ms: int | None = None


class RunResult(BaseModel):
    """What a finished action run reports back as outputs."""

    stdout: str = ""
    stderr: str = ""
    time_ms: int = 0
    stages: list[StageRecord] = Field(default_factory=list)
