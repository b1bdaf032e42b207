"""FastAPI dependency implementations."""

from __future__ import annotations

import re

from fastapi import Request

from src.shopease.core.errors import AuthenticationError
from src.shopease.core.security import ADMIN_PASSWORD_HEADER, authenticate_admin
from src.shopease.core.storage import Storage
from src.shopease.runtime.config.config_data import ConfigData

_INTEGER_ID = re.compile(r"-?[0-9]+")


def get_storage(request: Request) -> Storage:
    """Get the entity store registered on the application."""
    return request.app.state.storage


def get_app_config(request: Request) -> ConfigData:
    """Get the configuration the application was built with."""
    return request.app.state.config


def parse_id(raw: str) -> int | None:
    """Parse a path id; anything that is not an integer resolves to ``None``."""
    if not _INTEGER_ID.fullmatch(raw):
        return None
    return int(raw)


async def require_admin(request: Request) -> None:
    """Gate product mutations behind the shared admin password.

    Only active when ``admin.protect_mutations`` is enabled.
    """
    admin = get_app_config(request).admin
    if not admin.protect_mutations:
        return

    candidate = request.headers.get(ADMIN_PASSWORD_HEADER)
    if not authenticate_admin(candidate, admin.password):
        raise AuthenticationError("Admin authentication required")
