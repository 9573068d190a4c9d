"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from crafter.core.config import get_settings
from crafter.core.llm import GenerationClient, get_route_generation_client
from crafter.db.wizard_state import InMemoryWizardStore, get_wizard_store
from crafter.main import app
from tests.fakes.fake_backend import ScriptedBackend
from tests.fixtures_wizard import make_profile


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["CRAFTER_ENV"] = "test"
    os.environ["LLM_PROVIDER"] = "openai"
    os.environ["OPENAI_API_KEY"] = "test-openai-key"
    os.environ["WIZARD_STORE_BACKEND"] = "memory"
    os.environ.pop("NOTION_API_KEY", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> InMemoryWizardStore:
    return InMemoryWizardStore()


@pytest.fixture
def backend() -> ScriptedBackend:
    return ScriptedBackend()


@pytest.fixture
def generation_client(backend) -> GenerationClient:
    return GenerationClient(backend)


@pytest.fixture
def session_id(store) -> str:
    """A wizard session with an uploaded profile and nothing else."""
    profile = make_profile()
    store.create_session(profile)
    return profile.id


@pytest.fixture
def api_client(store, generation_client):
    """TestClient wired to the in-memory store and the scripted backend."""
    app.dependency_overrides[get_wizard_store] = lambda: store
    app.dependency_overrides[get_route_generation_client] = lambda: generation_client
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
