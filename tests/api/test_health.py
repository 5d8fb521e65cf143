# tests/api/test_health.py
"""Tests for the health and version endpoints."""

from realloc import __version__


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_status_ok(self, client):
        data = client.get("/health").json()
        assert data["status"] == "ok"
        assert data["version"] == __version__


def test_version(client):
    assert client.get("/version").json() == {"version": __version__}


def test_unknown_path_is_plain_text_404(client):
    response = client.post("/resize")
    assert response.status_code == 404
    assert response.text == "Not Found"
