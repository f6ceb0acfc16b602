import pytest
from fastapi.testclient import TestClient

from mermaid_chat.api.deps import get_settings_dependency
from mermaid_chat.api.main import create_app
from mermaid_chat.configs import LLMSettings, Settings


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_llm_configured(app, client):
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(
        llm=LLMSettings(api_key="key", model="gemini-test")
    )
    response = client.get("/api/v1/health/llm")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "LLM configured (gemini-test)"}


def test_health_check_llm_missing_key(app, client):
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(
        llm=LLMSettings(api_key=None)
    )
    response = client.get("/api/v1/health/llm")
    assert response.status_code == 200
    assert response.json() == {"status": "degraded", "message": "LLM API key not configured"}
