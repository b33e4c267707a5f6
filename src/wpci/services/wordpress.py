"""WordPress container options derived from the action inputs."""

from __future__ import annotations

from pathlib import PurePosixPath

from wpci.config import Settings
from wpci.errors import InvalidRunOptionError
from wpci.models import ActionInputs
from wpci.services.run_args import DockerRunArgs


def _basename(path: str) -> str:
    name = PurePosixPath(path.rstrip("/") or "/").name
    if name in ("", ".", ".."):
        raise InvalidRunOptionError(f"Cannot derive a mount name from {path!r}")
    return name


def container_run_args(inputs: ActionInputs, settings: Settings, network: str) -> DockerRunArgs:
    """Assemble the ``docker run`` options for the WordPress CI container."""
    args = DockerRunArgs(
        name=settings.container_name,
        network=network,
        publish=settings.publish,
    )
    args.env("WORDPRESS_DB_HOST", inputs.db_host)
    args.env("WORDPRESS_DB_NAME", inputs.db_name)
    args.env("WORDPRESS_DB_USER", inputs.db_user)
    args.env("WORDPRESS_DB_PASSWORD", inputs.db_password)
    if inputs.clean_on_start:
        args.env("CLEAN_ON_START", "yes")

    for plugin in inputs.plugins:
        args.volume(plugin, str(settings.plugins_dir / _basename(plugin)))
    for theme in inputs.themes:
        args.volume(theme, str(settings.themes_dir / _basename(theme)))

    if inputs.import_sql:
        args.env("IMPORT_SQL_FILE", str(settings.sql_import_path))
        args.volume(inputs.import_sql, str(settings.sql_import_path))
    return args
