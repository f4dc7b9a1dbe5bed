"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from rafflecode.app import App
from rafflecode.config import Config
from rafflecode.core.core import Core
from rafflecode.core.modules.code.storage import CodeStore
from rafflecode.web.server import create_fastapi_app


@pytest.fixture
def config_factory(tmp_path):
    """Create configs pointing at a temporary data directory, ignoring any .env file."""

    def factory(**overrides) -> Config:
        overrides.setdefault("data_path", str(tmp_path / "data"))
        return Config(_env_file=None, **overrides)

    return factory


@pytest.fixture
def config(config_factory):
    return config_factory()


@pytest.fixture
def persist_config(config_factory):
    return config_factory(persist_generated=True)


@pytest.fixture
def store(config):
    """Store backed by the same file the app uses."""
    return CodeStore(Core(config).store.path)


@pytest.fixture
def client(config) -> Iterator[TestClient]:
    with TestClient(create_fastapi_app(App(config), config)) as test_client:
        yield test_client


@pytest.fixture
def persist_client(persist_config) -> Iterator[TestClient]:
    with TestClient(create_fastapi_app(App(persist_config), persist_config)) as test_client:
        yield test_client
