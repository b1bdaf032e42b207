from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.shopease.api.http.app import create_app
from src.shopease.core.storage import MemStorage
from src.shopease.runtime.config.config_data import (
    AdminConfig,
    AppConfig,
    ConfigData,
    LoggingConfig,
    NotificationConfig,
)

ADMIN_PASSWORD = "s3cret-admin"
STORE_NUMBER = "+15550001111"


@pytest.fixture
def test_config() -> ConfigData:
    """Configuration for an app under test: quiet logs, known secrets."""
    return ConfigData(
        app=AppConfig(environment="test"),
        logging=LoggingConfig(level="WARNING", file=None),
        admin=AdminConfig(password=ADMIN_PASSWORD),
        notifications=NotificationConfig(store_whatsapp_number=STORE_NUMBER),
    )


@pytest.fixture
def storage() -> MemStorage:
    """A fresh store seeded with the sample catalog."""
    return MemStorage()


@pytest.fixture
def empty_storage() -> MemStorage:
    """A fresh store without the sample catalog."""
    return MemStorage(seed_catalog=False)


@pytest.fixture
def app(storage: MemStorage, test_config: ConfigData) -> FastAPI:
    return create_app(storage, test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient]:
    """Create a test client; the context manager runs the app lifespan."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture
def store_number() -> str:
    return STORE_NUMBER
