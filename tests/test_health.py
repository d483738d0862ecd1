"""Health endpoint and request id middleware tests."""


async def test_health_returns_ok(client) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "none"


async def test_request_id_is_echoed(client) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "req-42"})
    assert response.headers["X-Request-ID"] == "req-42"


async def test_request_id_is_generated_when_missing_or_invalid(client) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id!"})
    generated = response.headers["X-Request-ID"]
    assert generated and generated != "bad id!"
