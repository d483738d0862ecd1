"""Order and work endpoints without a configured database."""


async def test_create_order_requires_database(client) -> None:
    response = await client.post("/api/v1/orders", json={"priority": 1})
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"


async def test_work_requires_database(client) -> None:
    response = await client.get("/api/v1/orders/abc/work/CASTING")
    assert response.status_code == 503
