"""Department, requirement schema and feature flag endpoint tests."""


async def test_list_departments_in_pipeline_order(client) -> None:
    response = await client.get("/api/v1/departments")
    assert response.status_code == 200
    departments = response.json()
    assert [d["key"] for d in departments] == [
        "CAD",
        "PRINT",
        "CASTING",
        "FILLING",
        "MEENA",
        "POLISH_1",
        "SETTING",
        "POLISH_2",
        "ADDITIONAL",
    ]
    assert [d["sequence"] for d in departments] == list(range(1, 10))
    enabled = {d["key"]: d["enabled"] for d in departments}
    assert enabled["PRINT"] is False
    assert enabled["CASTING"] is True


async def test_casting_requirements(client) -> None:
    response = await client.get("/api/v1/departments/CASTING/requirements")
    assert response.status_code == 200
    schema = response.json()
    assert schema["title"] == "Casting Workshop"
    assert schema["enabled"] is True
    fields = {f["name"]: f for f in schema["form_fields"]}
    assert fields["metalType"]["required"] is True
    assert fields["metalWeight"]["type"] == "number"


async def test_unknown_department_is_404(client) -> None:
    response = await client.get("/api/v1/departments/ENGRAVING/requirements")
    assert response.status_code == 404
    assert response.json()["error"] == "SCHEMA_NOT_FOUND"


async def test_legacy_id_serves_outsourced_print_schema(client) -> None:
    response = await client.get("/api/v1/departments/3D_PRINTING/requirements")
    assert response.status_code == 200
    schema = response.json()
    assert schema["department"] == "PRINT"
    assert schema["enabled"] is False
    assert schema["title"] == "3D Printing Lab"
    assert schema["coming_soon_message"]


async def test_enabling_print_switches_to_full_schema(client) -> None:
    response = await client.put(
        "/api/v1/departments/PRINT/feature-flag", json={"enabled": True}
    )
    assert response.status_code == 200
    assert response.json()["flags"]["PRINT"] is True

    schema = (await client.get("/api/v1/departments/PRINT/requirements")).json()
    assert schema["enabled"] is True
    assert schema["coming_soon_message"] is None

    reset = await client.delete("/api/v1/departments/feature-flags")
    assert reset.json()["flags"]["PRINT"] is False


async def test_feature_flag_snapshot(client) -> None:
    response = await client.get("/api/v1/departments/feature-flags")
    assert response.status_code == 200
    flags = response.json()["flags"]
    assert len(flags) == 9
    assert flags["PRINT"] is False
