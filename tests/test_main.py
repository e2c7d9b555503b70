"""
Tests for the demo application
"""
from fastapi.testclient import TestClient
from main import create_app


class TestDemoApp:
    """Test the demo app wiring"""

    def test_health_check(self):
        client = TestClient(create_app())
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_reference_page_documents_the_app(self):
        client = TestClient(create_app())
        response = client.get("/reference")
        assert response.status_code == 200
        assert "API Reference Demo" in response.text
        assert "/health" in response.text

    def test_reference_prefix_from_environment(self, monkeypatch):
        monkeypatch.setenv("API_REFERENCE_PREFIX", "/api-docs")
        client = TestClient(create_app())
        assert client.get("/api-docs").status_code == 200
        assert client.get("/reference").status_code == 404
