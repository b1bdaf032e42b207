"""Process-wide application context.

The active ``ConfigData`` lives in a ``ContextVar`` so tests and tools can
swap it for the duration of a block with ``with_context``.
"""

import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from src.shopease.runtime.config.config_data import ConfigData
from src.shopease.runtime.config.config_template import load_templated_yaml


@dataclass
class AppContext:
    """Application-wide state shared by the API and the CLI."""

    config: ConfigData


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context",
    default=AppContext(
        config=load_templated_yaml(Path(os.getenv("APP_CONFIG_FILE", "config.yaml")))
    ),
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Make ``context`` current; the returned token restores the previous one."""
    return _app_context.set(context)


def _explicit_fields(section: BaseModel) -> dict[str, Any]:
    """Values the caller actually set, nested sections included."""
    fields = {}
    for name in section.model_fields_set:
        value = getattr(section, name)
        fields[name] = _explicit_fields(value) if isinstance(value, BaseModel) else value
    return fields


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily layer ``config_override`` over the current configuration.

    Only fields set on the override change; every other section and value is
    inherited.

    Example:
        with with_context(ConfigData(store=StoreConfig(seed_catalog=False))):
            assert get_config().store.seed_catalog is False
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    current = get_context()
    merged = ConfigData.model_validate(
        _merge(current.config.model_dump(), _explicit_fields(config_override))
    )
    token = set_context(replace(current, config=merged))
    try:
        yield
    finally:
        _app_context.reset(token)


def get_config() -> ConfigData:
    """Configuration of the current context."""
    return get_context().config
