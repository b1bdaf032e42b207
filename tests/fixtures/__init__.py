"""Shared pytest fixtures."""

from .core import *  # noqa: F401,F403
from .payloads import *  # noqa: F401,F403
