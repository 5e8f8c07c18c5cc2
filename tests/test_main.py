"""
Tests for the app-level endpoints.
"""

import pytest


@pytest.mark.asyncio
async def test_root(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


@pytest.mark.asyncio
async def test_health_and_ready(client):
    assert (await client.get("/health")).json() == {"status": "healthy"}
    assert (await client.get("/ready")).json() == {"status": "ready"}


@pytest.mark.asyncio
async def test_unknown_route_uses_envelope(client):
    response = await client.get("/api/nope")
    assert response.status_code == 404
    assert response.json()["success"] is False
