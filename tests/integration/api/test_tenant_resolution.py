"""
Integration tests for slug resolution and the tenant picker.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_tenant_info_merges_defaults(client: AsyncClient, provision):
    await provision("hotel-aqua")

    response = await client.get("/tenants/hotel-aqua/info")

    assert response.status_code == 200
    data = response.json()
    assert data["tenant"]["name"] == "Hotel Aqua"
    assert data["tenant"]["primary_color"] == "#273949"
    assert data["settings"] == {
        "timezone": "America/Mexico_City",
        "currency": "MXN",
        "language": "es-MX",
        "units": "metric",
        "reportFormat": "pdf",
    }
    assert data["features"] == {
        "module.waste": True,
        "module.energy": False,
        "module.water": False,
        "module.circular_economy": False,
    }


@pytest.mark.asyncio
async def test_unknown_slug_not_found(client: AsyncClient):
    response = await client.get("/tenants/nowhere/info")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TENANT_NOT_FOUND"


@pytest.mark.asyncio
async def test_deactivated_tenant_no_longer_resolves(
    client: AsyncClient, provision, admin_headers
):
    await provision("hotel-aqua")

    response = await client.post("/admin/tenants/hotel-aqua/deactivate", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"slug": "hotel-aqua", "is_active": False}

    assert (await client.get("/tenants/hotel-aqua/info")).status_code == 404
    assert (await client.get("/tenants/hotel-aqua/waste-data")).status_code == 404
    assert (await client.get("/tenants")).json() == []

    await client.post("/admin/tenants/hotel-aqua/activate", headers=admin_headers)
    assert (await client.get("/tenants/hotel-aqua/info")).status_code == 200


@pytest.mark.asyncio
async def test_tenant_picker_lists_active_tenants(client: AsyncClient, provision):
    await provision("rosewood")
    await provision("hotel-aqua")

    response = await client.get("/tenants")

    assert response.status_code == 200
    assert [t["slug"] for t in response.json()] == ["hotel-aqua", "rosewood"]
    assert response.json()[1]["dashboard_url"] == "/rosewood/dashboard"
