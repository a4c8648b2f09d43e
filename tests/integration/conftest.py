from typing import Any, Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from todo_service.config import Settings, get_settings
from todo_service.main import app as main_app


@pytest.fixture
def settings_overrides() -> dict[str, Any]:
    return {}


@pytest.fixture
def test_settings(settings_overrides: dict[str, Any]) -> Settings:
    common_settings: dict[str, Any] = {
        "API_KEY": None,
        "OTEL_ENABLED": False,
        "RATE_LIMIT_ENABLED": False,
        "DEFAULT_PAGE_SIZE": 2,
    }
    return Settings(_env_file=None, **{**common_settings, **settings_overrides})  # type: ignore


@pytest.fixture
def test_app(test_settings: Settings) -> Generator[FastAPI, None, None]:
    def get_test_settings() -> Settings:
        return test_settings

    main_app.dependency_overrides[get_settings] = get_test_settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    # Entering the client runs the lifespan, which builds a fresh task store
    with TestClient(test_app) as client:
        yield client
