"""User domain entity."""

from pydantic import Field

from src.shopease.entities.core._base import Entity


class User(Entity):
    """User account.

    Users are created once and never updated or deleted through the API.
    """

    username: str = Field(description="Unique login name")
    password: str = Field(description="Account password")
