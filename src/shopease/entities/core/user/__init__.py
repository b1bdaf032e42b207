"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity
- InsertUser: Creation payload schema
- UserRepository: Data access layer
"""

from .entity import User
from .repository import UserRepository
from .schemas import InsertUser, validate_insert_user

__all__ = ["User", "InsertUser", "UserRepository", "validate_insert_user"]
