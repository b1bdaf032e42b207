from loguru import logger

from src.shopease.entities.core._base import EntityTable

from .entity import User
from .schemas import InsertUser


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, table: EntityTable[User]) -> None:
        self._table = table

    def create(self, fields: InsertUser) -> User:
        user = self._table.insert(
            lambda user_id: User(id=user_id, **fields.model_dump())
        )
        logger.info(f"Created user {user.id}")
        return user

    def get(self, user_id: int) -> User | None:
        return self._table.get(user_id)

    def get_by_username(self, username: str) -> User | None:
        return self._table.find(lambda user: user.username == username)
