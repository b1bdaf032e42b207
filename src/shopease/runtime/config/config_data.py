"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class StoreConfig(BaseModel):
    """In-memory entity store configuration."""

    seed_catalog: bool = Field(
        default=True, description="Seed the catalog with the sample products"
    )
    enforce_product_reference: bool = Field(
        default=False,
        description="Reject orders whose productId does not match a product",
    )


class NotificationConfig(BaseModel):
    """WhatsApp notification configuration."""

    store_whatsapp_number: str = Field(
        default="+918087949226", description="Destination number for store messages"
    )
    simulate: bool = Field(
        default=False, description="Log messages and links instead of opening them"
    )


class AdminConfig(BaseModel):
    """Shared-secret admin gate configuration."""

    password: str = Field(default="admin123", description="Admin panel password")
    protect_mutations: bool = Field(
        default=False,
        description="Require X-Admin-Password on product create/update/delete",
    )


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    store: StoreConfig = Field(
        default_factory=StoreConfig, description="Entity store configuration"
    )
    notifications: NotificationConfig = Field(
        default_factory=NotificationConfig, description="Notification configuration"
    )
    admin: AdminConfig = Field(
        default_factory=AdminConfig, description="Admin gate configuration"
    )
