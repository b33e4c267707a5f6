"""Runtime configuration via environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from wpci.constants import (
    CONTAINER_NAME,
    PLUGINS_DIR,
    PROXY_SCRIPT_PATH,
    PUBLISH,
    SQL_IMPORT_PATH,
    THEMES_DIR,
    WAIT_INTERVAL_MS,
    WAIT_TIMEOUT_MS,
    WORDPRESS_CI_URL,
)


class Settings(BaseSettings):
    """Knobs that are not action inputs, overridable with ``WPCI_*`` variables."""

    container_name: str = CONTAINER_NAME
    publish: str = PUBLISH
    url: str = WORDPRESS_CI_URL
    wait_timeout_ms: int = Field(default=WAIT_TIMEOUT_MS, ge=0)
    wait_interval_ms: int = Field(default=WAIT_INTERVAL_MS, gt=0)
    proxy_script_path: Path = PROXY_SCRIPT_PATH
    plugins_dir: Path = PLUGINS_DIR
    themes_dir: Path = THEMES_DIR
    sql_import_path: Path = SQL_IMPORT_PATH
    debug: bool = False

    model_config = {"env_prefix": "WPCI_"}


@lru_cache(maxsize=1)
def get_config() -> Settings:
    """Return the global Settings (resolved once, cached)."""
    return Settings()
