"""
Integration tests for source documents and tenant alerts.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_register_and_list_documents(client: AsyncClient, provision):
    await provision("rosewood")
    await provision("hotel-aqua")

    response = await client.post(
        "/tenants/rosewood/documents",
        json={"file_name": "enero-2025.xlsx", "file_size": 2048, "processed": True},
    )

    assert response.status_code == 201
    document = response.json()
    assert document["file_name"] == "enero-2025.xlsx"
    assert document["processed"] is True

    own = (await client.get("/tenants/rosewood/documents")).json()
    assert [d["id"] for d in own] == [document["id"]]
    assert (await client.get("/tenants/hotel-aqua/documents")).json() == []
    # No alert for a cleanly processed file
    assert (await client.get("/tenants/rosewood/alerts")).json() == []


@pytest.mark.asyncio
async def test_register_document_validation(client: AsyncClient, provision):
    await provision("rosewood")

    blank = await client.post("/tenants/rosewood/documents", json={"file_name": "  "})
    negative = await client.post(
        "/tenants/rosewood/documents", json={"file_name": "a.xlsx", "file_size": -1}
    )
    unknown = await client.get("/tenants/ghost/documents")

    assert blank.status_code == 400
    assert blank.json()["error"]["code"] == "VALIDATION_ERROR"
    assert negative.status_code == 422
    assert unknown.status_code == 404


@pytest.mark.asyncio
async def test_processing_error_opens_alert_that_can_be_resolved(
    client: AsyncClient, provision
):
    """
    Given a document registered with a processing error
    When the tenant lists and resolves its alerts
    Then the alert links the document and its resolved flag round-trips
    """
    await provision("rosewood")
    document = (
        await client.post(
            "/tenants/rosewood/documents",
            json={"file_name": "marzo.xlsx", "processing_error": "Missing header row"},
        )
    ).json()

    alerts = (await client.get("/tenants/rosewood/alerts")).json()
    assert len(alerts) == 1
    alert = alerts[0]
    assert alert["type"] == "error"
    assert alert["document_id"] == document["id"]
    assert alert["message"] == "Error processing document marzo.xlsx: Missing header row"
    assert alert["resolved"] is False

    response = await client.patch(
        f"/tenants/rosewood/alerts/{alert['id']}", json={"resolved": True}
    )

    assert response.status_code == 200
    assert response.json()["resolved"] is True
    assert (await client.get("/tenants/rosewood/alerts", params={"resolved": False})).json() == []
    resolved = (await client.get("/tenants/rosewood/alerts", params={"resolved": True})).json()
    assert [a["id"] for a in resolved] == [alert["id"]]

    reopened = await client.patch(
        f"/tenants/rosewood/alerts/{alert['id']}", json={"resolved": False}
    )
    assert reopened.json()["resolved"] is False


@pytest.mark.asyncio
async def test_alert_update_rules(client: AsyncClient, provision):
    await provision("rosewood")
    await provision("hotel-aqua")
    await client.post(
        "/tenants/rosewood/documents",
        json={"file_name": "abril.xlsx", "processing_error": "Bad date"},
    )
    alert_id = (await client.get("/tenants/rosewood/alerts")).json()[0]["id"]

    not_boolean = await client.patch(
        f"/tenants/rosewood/alerts/{alert_id}", json={"resolved": "yes"}
    )
    foreign = await client.patch(
        f"/tenants/hotel-aqua/alerts/{alert_id}", json={"resolved": True}
    )

    assert not_boolean.status_code == 422
    assert foreign.status_code == 404
    assert foreign.json()["error"]["code"] == "ALERT_NOT_FOUND"
    assert (await client.get("/tenants/hotel-aqua/alerts")).json() == []
    assert (await client.get("/tenants/rosewood/alerts")).json()[0]["resolved"] is False
