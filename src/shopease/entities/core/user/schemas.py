"""Validation schema for user creation payloads."""

from typing import Any

from src.shopease.entities.core._base import NonEmptyStr, WireModel, validate_payload


class InsertUser(WireModel):
    """Fields required to create a user."""

    username: NonEmptyStr
    password: NonEmptyStr


def validate_insert_user(payload: Any) -> InsertUser:
    return validate_payload(InsertUser, payload, "Invalid user data")
