"""Shared fixtures: in-memory account store, scripted randomness, API client."""

import pytest
from fastapi.testclient import TestClient

from flipball.config import Settings
from flipball.database.repositories import InMemoryAccountRepository
from flipball.main import create_app
from flipball.services import AccountService, WagerService
from tests.fakes import ScriptedRandomSource


@pytest.fixture
def repo() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def account_service() -> AccountService:
    return AccountService()


@pytest.fixture
def scripted_random() -> ScriptedRandomSource:
    return ScriptedRandomSource()


@pytest.fixture
def wager_service(scripted_random: ScriptedRandomSource) -> WagerService:
    return WagerService(random_source=scripted_random)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        storage_backend="memory",
        static_dir=str(tmp_path / "public"),
        logfire_token="",
    )


@pytest.fixture
def client(settings: Settings, scripted_random: ScriptedRandomSource):
    app = create_app(settings)
    with TestClient(app) as test_client:
        app.state.wager_service.random_source = scripted_random
        yield test_client
