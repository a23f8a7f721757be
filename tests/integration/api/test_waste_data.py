"""
Integration tests for the tenant-scoped waste data store.
"""

import asyncio

import pytest
from httpx import AsyncClient
from uuid import UUID

from econova.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from econova.app.use_cases.waste import RecordObservationCommand, RecordObservationUseCase
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_record_observation_derives_fields(client: AsyncClient, provision, test_data):
    await provision("rosewood")

    response = await client.post(
        "/tenants/rosewood/waste-data",
        json=test_data.observation("january", total_waste=1.0, deviation=999.0),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["total_waste"] == 180.0
    assert data["deviation"] == 16.67
    assert data["poda_waste"] is None
    assert data["impact"] == {"trees_saved": 0.0, "water_saved": 260.0, "energy_saved": 15.0}


@pytest.mark.asyncio
async def test_measured_impact_is_returned_as_is(client: AsyncClient, provision, test_data):
    await provision("rosewood")

    response = await client.post(
        "/tenants/rosewood/waste-data",
        json=test_data.observation("january", trees_saved=3.5),
    )

    impact = response.json()["impact"]
    assert impact["trees_saved"] == 3.5
    assert impact["water_saved"] == 260.0


@pytest.mark.asyncio
async def test_list_is_ordered_and_filtered(client: AsyncClient, provision, test_data):
    await provision("rosewood")
    for name in ("march", "january", "only_recyclable"):
        await client.post("/tenants/rosewood/waste-data", json=test_data.observation(name))

    all_rows = (await client.get("/tenants/rosewood/waste-data")).json()
    february = (
        await client.get(
            "/tenants/rosewood/waste-data",
            params={"from_date": "2025-02-01T00:00:00", "to_date": "2025-03-01T00:00:00"},
        )
    ).json()

    assert [row["date"][:10] for row in all_rows] == ["2025-01-15", "2025-02-01", "2025-03-10"]
    assert len(february) == 1
    assert february[0]["deviation"] == 100.0


@pytest.mark.asyncio
async def test_inverted_range_rejected(client: AsyncClient, provision):
    await provision("rosewood")

    response = await client.get(
        "/tenants/rosewood/waste-data",
        params={"from_date": "2025-03-01T00:00:00", "to_date": "2025-01-01T00:00:00"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_negative_quantity_rejected(client: AsyncClient, provision, test_data):
    await provision("rosewood")

    response = await client.post(
        "/tenants/rosewood/waste-data",
        json=test_data.observation("january", organic_waste=-1),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_tenants_never_see_each_others_observations(
    client: AsyncClient, provision, test_data
):
    """
    Given observations recorded for rosewood
    When hotel-aqua lists or patches them through its own slug
    Then it sees nothing and the patch is NOT_FOUND
    """
    await provision("rosewood")
    await provision("hotel-aqua")
    created = (
        await client.post("/tenants/rosewood/waste-data", json=test_data.observation("january"))
    ).json()

    assert (await client.get("/tenants/hotel-aqua/waste-data")).json() == []

    response = await client.patch(
        f"/tenants/hotel-aqua/waste-data/{created['id']}", json={"organic_waste": 1.0}
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "OBSERVATION_NOT_FOUND"

    unchanged = (await client.get("/tenants/rosewood/waste-data")).json()[0]
    assert exclude_keys(unchanged) == exclude_keys(created)


@pytest.mark.asyncio
async def test_patch_recomputes_derived_fields(client: AsyncClient, provision, test_data):
    await provision("rosewood")
    created = (
        await client.post("/tenants/rosewood/waste-data", json=test_data.observation("march"))
    ).json()

    response = await client.patch(
        f"/tenants/rosewood/waste-data/{created['id']}",
        json={"recyclable_waste": 30.0, "deviation": 0.0},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_waste"] == 150.0
    assert data["deviation"] == 33.33
    assert data["poda_waste"] == 20.0


@pytest.mark.asyncio
async def test_waste_routes_require_waste_feature(
    client: AsyncClient, provision, admin_headers, test_data
):
    await provision("energy-only")

    response = await client.get("/tenants/energy-only/waste-data")
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FEATURE_DISABLED"

    summary = await client.get(
        "/tenants/energy-only/summary", params={"kind": "calendar_year", "year": 2025}
    )
    assert summary.status_code == 403

    toggle = await client.put(
        "/admin/tenants/energy-only/features/module.waste",
        json={"enabled": True},
        headers=admin_headers,
    )
    assert toggle.status_code == 200

    response = await client.post(
        "/tenants/energy-only/waste-data", json=test_data.observation("january")
    )
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_document_reference_must_belong_to_tenant(
    client: AsyncClient, provision, test_data
):
    await provision("rosewood")
    await provision("hotel-aqua")
    document = (
        await client.post("/tenants/rosewood/documents", json={"file_name": "enero-2025.xlsx"})
    ).json()

    own = await client.post(
        "/tenants/rosewood/waste-data",
        json=test_data.observation("january", document_id=document["id"]),
    )
    foreign = await client.post(
        "/tenants/hotel-aqua/waste-data",
        json=test_data.observation("january", document_id=document["id"]),
    )

    assert own.status_code == 201
    assert own.json()["document_id"] == document["id"]
    assert foreign.status_code == 404
    assert foreign.json()["error"]["code"] == "DOCUMENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_isolation_holds_under_concurrent_inserts(
    client: AsyncClient, session_factory, provision, test_data
):
    """
    Given inserts into rosewood and hotel-aqua interleaved on separate sessions
    When each tenant lists, summarizes and reports its data
    Then only its own observations appear
    """
    tenant_ids = {
        "rosewood": (await provision("rosewood"))["id"],
        "hotel-aqua": (await provision("hotel-aqua"))["id"],
    }
    organic = {"rosewood": 1.0, "hotel-aqua": 2.0}

    async def insert(slug: str):
        command = RecordObservationCommand(
            **test_data.observation("january", organic_waste=organic[slug])
        )
        async with session_factory() as session:
            result = await RecordObservationUseCase(SqlAlchemyUnitOfWork(session)).execute(
                UUID(tenant_ids[slug]), command
            )
        assert result.is_ok(), result.error

    await asyncio.gather(*(insert(slug) for _ in range(5) for slug in tenant_ids))

    window = {"kind": "month", "year": 2025, "month": 1}
    for slug, tenant_id in tenant_ids.items():
        rows = (await client.get(f"/tenants/{slug}/waste-data")).json()
        assert len(rows) == 5
        assert {row["tenant_id"] for row in rows} == {tenant_id}
        assert {row["organic_waste"] for row in rows} == {organic[slug]}

        summary = (await client.get(f"/tenants/{slug}/summary", params=window)).json()
        assert summary["observation_count"] == 5
        assert summary["totals"]["organic"] == organic[slug] * 5

        report = (await client.get(f"/tenants/{slug}/report", params=window)).json()
        assert {o["tenant_id"] for o in report["observations"]} == {tenant_id}
