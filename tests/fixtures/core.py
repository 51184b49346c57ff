from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.crudhub.runtime.config.config_data import ConfigData
from src.crudhub.runtime.context import get_config, set_config

TEST_SIGNING_SECRET = "test-session-signing-secret"


@pytest.fixture(autouse=True)
def app_config() -> Generator[ConfigData]:
    """Process-wide test configuration: in-memory database, cheap hashing."""
    original = get_config()
    config = original.model_copy(deep=True)
    config.app.environment = "test"
    config.app.session_signing_secret = TEST_SIGNING_SECRET
    config.app.client_url = "http://localhost:3000"
    config.database.url = "sqlite://"
    config.database.auto_create_tables = True
    config.security.pbkdf2_iterations = 1_000
    config.payment.enabled = False

    set_config(config)
    try:
        yield config
    finally:
        set_config(original)


@pytest.fixture
def session() -> Generator[Session]:
    """Create a fresh database session for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.crudhub.entities import (  # noqa: F401
        OrderTable,
        ProductTable,
        ProjectTable,
        TaskTable,
        UserTable,
    )

    SQLModel.metadata.create_all(engine)

    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()
            engine.dispose()
