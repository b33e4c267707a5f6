"""Read the action inputs from the runner environment."""

from __future__ import annotations

import json
import logging
from typing import Mapping

from pydantic import ValidationError

from wpci import actions
from wpci.constants import DEFAULT_IMAGE
from wpci.errors import InputError
from wpci.models import ActionInputs

log = logging.getLogger(__name__)


def read_inputs(env: Mapping[str, str] | None = None) -> ActionInputs:
    """Collect and validate all inputs, echoing them at debug level."""
    image = actions.get_input("image", env=env) or DEFAULT_IMAGE
    log.debug("image: %s", image)
    network = actions.get_input("network", env=env)
    log.debug("network: %s", network)

    raw = {
        "image": image,
        "network": network,
        "plugins": actions.get_input("plugins", env=env),
        "themes": actions.get_input("themes", env=env),
        "db_host": actions.get_input("db-host", env=env),
        "db_name": actions.get_input("db-name", env=env),
        "db_user": actions.get_input("db-user", env=env),
        "db_password": actions.get_input("db-password", env=env),
        "clean_on_start": actions.get_boolean_input("clean-on-start", env=env),
        "import_sql": actions.get_input("import-sql", env=env),
        "test_command": actions.get_input("test-command", env=env),
        "test_command_context": actions.get_input("test-command-context", env=env),
    }
    try:
        inputs = ActionInputs(**raw)
    except ValidationError as exc:
        raise InputError(f"Invalid action inputs: {exc}") from exc

    actions.set_secret(inputs.db_password)
    log.debug("plugins: %s", json.dumps(inputs.plugins))
    log.debug("themes: %s", json.dumps(inputs.themes))
    log.debug("db-host: %s", inputs.db_host)
    log.debug("db-name: %s", inputs.db_name)
    log.debug("db-user: %s", inputs.db_user)
    log.debug("db-password: %s", "[REDACTED]" if inputs.db_password else "[EMPTY]")
    log.debug("clean-on-start: %s", "true" if inputs.clean_on_start else "false")
    log.debug("import-sql: %s", inputs.import_sql or "")
    log.debug("test-command: %s", inputs.test_command)
    log.debug("test-command-context: %s", inputs.test_command_context)
    return inputs
