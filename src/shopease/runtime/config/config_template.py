"""Loading of ``config.yaml`` with ``${VAR}`` placeholders resolved from the environment."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.shopease.runtime.config.config_data import ConfigData

# ${NAME}, ${NAME:-default} or ${NAME:?message}
_PLACEHOLDER = re.compile(r"\$\{(?P<name>[^}:]+)(?:(?P<op>:-|:\?)(?P<arg>[^}]*))?\}")

DEFAULT_ADMIN_PASSWORD = "admin123"


def substitute_env_vars(text: str) -> str:
    """Replace every placeholder in ``text``.

    ``${NAME}`` and ``${NAME:?message}`` are required and raise ``ValueError``
    when unset; ``${NAME:-default}`` falls back to ``default``.
    """

    def resolve(match: re.Match[str]) -> str:
        name, op, arg = match.group("name", "op", "arg")
        value = os.getenv(name)
        if value is not None:
            return value
        if op == ":-":
            return arg
        if op == ":?":
            raise ValueError(f"Required environment variable {name}: {arg}")
        raise ValueError(f"Required environment variable {name} not set")

    return _PLACEHOLDER.sub(resolve, text)


def _promote_environment_overrides(environment: str) -> None:
    """Expose ``<ENVIRONMENT>_NAME`` variables as ``NAME``.

    With ``APP_ENVIRONMENT=test``, ``TEST_ADMIN_PASSWORD`` wins over
    ``ADMIN_PASSWORD``.
    """
    prefix = f"{environment.upper()}_"
    for name, value in list(os.environ.items()):
        if name.startswith(prefix):
            os.environ[name[len(prefix):]] = value
            logger.debug(f"Set environment variable {name[len(prefix):]} from {name}")


def load_templated_yaml(file_path: Path) -> ConfigData:
    """Read the ``config:`` section of ``file_path`` into ``ConfigData``.

    A missing file yields the model defaults.

    Raises:
        ValueError: If a required variable is unset, the YAML is empty or
            malformed, or the values do not form a valid configuration
    """
    if not file_path.exists():
        logger.warning(f"Configuration file {file_path} not found; using defaults")
        return ConfigData()

    environment = os.getenv("APP_ENVIRONMENT", "development")
    logger.info(f"Loading configuration for environment: {environment}")
    _promote_environment_overrides(environment)

    try:
        loaded = yaml.safe_load(substitute_env_vars(file_path.read_text()))
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not loaded:
        raise ValueError("Failed to parse YAML")

    try:
        config = ConfigData(**loaded.get("config", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    if (
        config.app.environment == "production"
        and config.admin.password == DEFAULT_ADMIN_PASSWORD
    ):
        logger.warning("Admin password is still the default value in production")

    return config
