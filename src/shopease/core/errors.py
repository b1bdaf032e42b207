"""Error taxonomy shared by the store, the schemas and the HTTP layer.

Every error the application raises on purpose derives from
``ShopEaseError`` and carries the HTTP status it maps to. The API layer
renders them as ``{"message": ...}`` bodies; anything else that escapes a
route is converted to a ``StoreError`` by ``store_errors``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger


class ShopEaseError(Exception):
    """Base class for all application errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, object]:
        return {"message": self.message}


class ValidationError(ShopEaseError):
    """Payload failed its schema; ``field`` names the first violated field."""

    status_code = 400

    def __init__(
        self, message: str, field: str | None = None, reason: str | None = None
    ) -> None:
        super().__init__(message)
        self.field = field
        self.reason = reason

    def with_message(self, message: str) -> ValidationError:
        """Return a copy carrying a route-specific message."""
        return ValidationError(message, field=self.field, reason=self.reason)

    def to_dict(self) -> dict[str, object]:
        return {"message": self.message, "field": self.field}


class NotFoundError(ShopEaseError):
    """The id does not resolve to an existing record."""

    status_code = 404


class ReferentialError(ShopEaseError):
    """An order references a product that does not exist."""

    status_code = 400


class AuthenticationError(ShopEaseError):
    """The shared admin secret was missing or wrong."""

    status_code = 401


class StoreError(ShopEaseError):
    """Unexpected failure while reading or writing the store."""

    status_code = 500


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Convert unexpected exceptions raised inside the block into ``StoreError``.

    Application errors pass through untouched so their own status code wins.
    """
    try:
        yield
    except ShopEaseError:
        raise
    except Exception as exc:
        logger.opt(exception=exc).error(message)
        raise StoreError(message) from exc
