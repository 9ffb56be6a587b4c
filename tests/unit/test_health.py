from __future__ import annotations


def test_health_not_configured_is_healthy(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert data["services"]["employees_api"] == "not_configured"


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["ready"] is True


def test_console_page_served_without_backend(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Add New Employee" in response.text
