"""Action input model."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


def _split_lines(value: Any) -> Any:
    if isinstance(value, str):
        return [line.strip() for line in value.strip().split("\n") if line.strip()]
    return value


class ActionInputs(BaseModel):
    """Validated inputs of a single action run."""

    image: str
    network: str = ""
    plugins: list[str] = Field(default_factory=list)
    themes: list[str] = Field(default_factory=list)
    db_host: str = ""
    db_name: str = ""
    db_user: str = ""
    db_password: str = Field(default="", repr=False)
    clean_on_start: bool = False
    import_sql: str | None = None
    test_command: str = ""
    test_command_context: Path = Path(".")

    @field_validator("plugins", "themes", mode="before")
    @classmethod
    def _newline_delimited(cls, value: Any) -> Any:
        return _split_lines(value)

    @field_validator("import_sql", mode="before")
    @classmethod
    def _blank_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("test_command_context", mode="before")
    @classmethod
    def _default_context(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return "."
        return value

    @property
    def db_hostname(self) -> str:
        """Host part of ``db_host`` (``db:3306`` -> ``db``)."""
        host = self.db_host.strip()
        if host.startswith("["):
            return host[1:].split("]", 1)[0]
        return host.rsplit(":", 1)[0] if host.count(":") == 1 else host
