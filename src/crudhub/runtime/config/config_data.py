"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(default=["http://localhost:3000"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(default=["GET", "POST", "OPTIONS"])
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


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./crudhub.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")
    auto_create_tables: bool = Field(
        default=True, description="Create missing tables at application startup"
    )
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the database connection string, injecting the password if configured."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        if self.password_env_var is None or self.is_sqlite:
            return self.url

        import os

        password = os.getenv(self.password_env_var)
        if not password:
            raise ValueError(f"Environment variable {self.password_env_var} not set")

        if base_url.password:
            logger.warning(
                "Database URL already contains a password; using the one from {}",
                self.password_env_var,
            )
        return base_url.set(password=password).render_as_string(hide_password=False)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=5000, description="Application port")
    client_url: str = Field(
        default="http://localhost:3000",
        description="Origin of the browser client, used for redirect URLs",
    )
    session_max_age: int = Field(
        default=3600, description="Session credential lifetime in seconds"
    )
    session_signing_secret: str | None = Field(
        default=None, description="Secret for signing session JWTs"
    )
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class JWTConfig(BaseModel):
    """Session credential settings."""

    algorithm: str = Field(default="HS256", description="Signing algorithm")
    issuer: str = Field(default="crudhub", description="Issuer claim for session tokens")
    audience: str = Field(default="crudhub-api", description="Audience claim for session tokens")
    clock_skew: int = Field(default=30, description="Clock skew tolerance in seconds")


class SecurityConfig(BaseModel):
    """Password policy and hashing parameters."""

    password_min_length: int = Field(
        default=8, description="Minimum password length accepted at registration"
    )
    pbkdf2_iterations: int = Field(
        default=390_000, description="PBKDF2-SHA256 iteration count"
    )
    salt_bytes: int = Field(default=16, description="Random salt size in bytes")


class PaymentConfig(BaseModel):
    """Payment provider configuration."""

    enabled: bool = Field(
        default=False,
        description="Call the external provider; when disabled a local session id is issued",
    )
    api_url: str = Field(
        default="https://api.stripe.com/v1/checkout/sessions",
        description="Endpoint creating a checkout session",
    )
    api_key: str | None = Field(default=None, description="Provider secret key")
    currency: str = Field(default="usd", description="Currency for line items")
    timeout_seconds: float = Field(default=10.0, description="Provider request timeout")
    success_path: str = Field(default="/success", description="Client path after payment")
    cancel_path: str = Field(default="/cancel", description="Client path after cancel")


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    jwt: JWTConfig = Field(
        default_factory=JWTConfig, description="Session credential configuration"
    )
    security: SecurityConfig = Field(
        default_factory=SecurityConfig, description="Security configuration"
    )
    payment: PaymentConfig = Field(
        default_factory=PaymentConfig, description="Payment provider configuration"
    )
