"""Pytest configuration and shared fixtures."""

import os
from typing import AsyncGenerator, Generator
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from academic_records.config import Settings


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Create test settings instance."""
    # Override environment variables for testing
    os.environ.setdefault("API_TITLE", "Academic Records Test")
    os.environ.setdefault("API_VERSION", "0.1.0-test")
    os.environ.setdefault("DEBUG", "False")
    os.environ.setdefault("HOST", "127.0.0.1")
    os.environ.setdefault("PORT", "8000")
    # Database settings for tests
    os.environ.setdefault("DB_HOST", "localhost")
    os.environ.setdefault("DB_PORT", "5432")
    os.environ.setdefault("DB_USER", "test_user")
    os.environ.setdefault("DB_PASSWORD", "test_password")
    os.environ.setdefault("DB_NAME", "test_db")

    return Settings()


@pytest.fixture
def app(test_settings: Settings) -> Generator[FastAPI, None, None]:
    """Create FastAPI application with database startup disabled."""
    with patch("academic_records.application.init_db", new_callable=AsyncMock):
        with patch("academic_records.application.close_db", new_callable=AsyncMock):
            from academic_records.application import create_app

            app = create_app()
            yield app
            app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client for FastAPI application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
