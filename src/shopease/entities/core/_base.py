"""Base classes shared by every entity family.

- ``WireModel``: pydantic model speaking camelCase on the wire
- ``Entity``: immutable stored record with an integer identifier
- ``EntityTable``: in-memory table with its own id sequence and lock
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Annotated, Any, Generic, TypeVar
from urllib.parse import urlparse

from email_validator import validate_email
from loguru import logger
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictStr, StringConstraints
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from src.shopease.core.errors import ValidationError


def _check_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an http(s) URL")
    return value


def _check_email(value: str) -> str:
    # Shape check only: the address is stored exactly as the customer typed it
    validate_email(value, check_deliverability=False, test_environment=True)
    return value


NonEmptyStr = Annotated[StrictStr, StringConstraints(min_length=1)]
NumericStr = Annotated[StrictStr, StringConstraints(pattern=r"^[0-9]+(\.[0-9]+)?$")]
UrlStr = Annotated[StrictStr, AfterValidator(_check_url)]
EmailShapedStr = Annotated[StrictStr, AfterValidator(_check_email)]
PhoneStr = Annotated[StrictStr, StringConstraints(pattern=r"^[0-9]{10}$")]


class WireModel(BaseModel):
    """Model whose JSON keys are the camelCase form of its attribute names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Entity(WireModel):
    """Stored record with a store-assigned integer identifier.

    Entities are frozen: the store replaces a record instead of mutating it,
    so an object handed to a caller never changes underneath them.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Unique identifier assigned by the store")


EntityT = TypeVar("EntityT", bound=Entity)
ModelT = TypeVar("ModelT", bound=BaseModel)


class EntityTable(Generic[EntityT]):
    """In-memory rows of one entity family, keyed by id.

    Ids start at 1 and only move forward, deleting a row never frees its id.
    The lock makes id assignment and insertion a single step.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._rows: dict[int, EntityT] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def insert(self, build: Callable[[int], EntityT]) -> EntityT:
        """Build a row with the next id and store it."""
        with self._lock:
            entity = build(self._next_id)
            self._rows[entity.id] = entity
            self._next_id = entity.id + 1
        return entity

    def get(self, entity_id: int) -> EntityT | None:
        return self._rows.get(entity_id)

    def all(self) -> list[EntityT]:
        with self._lock:
            return list(self._rows.values())

    def find(self, predicate: Callable[[EntityT], bool]) -> EntityT | None:
        """Return the first row, in insertion order, matching ``predicate``."""
        for entity in self.all():
            if predicate(entity):
                return entity
        return None

    def replace(
        self, entity_id: int, change: Callable[[EntityT], EntityT]
    ) -> EntityT | None:
        """Swap a row for ``change(row)``; ``None`` when the id is unknown."""
        with self._lock:
            existing = self._rows.get(entity_id)
            if existing is None:
                return None
            updated = change(existing)
            self._rows[entity_id] = updated
        return updated

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            return self._rows.pop(entity_id, None) is not None

    def __len__(self) -> int:
        return len(self._rows)


def validate_payload(model: type[ModelT], payload: Any, message: str) -> ModelT:
    """Validate a decoded JSON body against ``model``.

    Raises:
        ValidationError: naming the first violated field (``None`` when the
            payload is not a JSON object at all)
    """
    if not isinstance(payload, dict):
        logger.warning(f"{model.__name__} rejected: payload is not an object")
        raise ValidationError(message, reason="payload must be a JSON object")

    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        logger.warning(f"{model.__name__} rejected on field {field}: {first['msg']}")
        raise ValidationError(message, field=field, reason=first["msg"]) from exc
