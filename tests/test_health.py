"""Tests for service liveness endpoints."""

from fastapi import status


def test_root_responds(client) -> None:
    """Verify that the root endpoint describes the API."""
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["docs"] == "/docs"


def test_health_check(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}
