"""
Unit tests for the waste record store use cases.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

from econova.app.use_cases.waste import (
    ListObservationsUseCase,
    RecordObservationCommand,
    RecordObservationUseCase,
    UpdateObservationCommand,
    UpdateObservationUseCase,
)
from econova.domain.entities import WasteObservation


@pytest.fixture
def tenant_id():
    return uuid4()


@pytest.fixture
def record_uow(mock_uow):
    mock_uow.waste_observations.create = AsyncMock(side_effect=lambda tenant_id, obs: obs)
    mock_uow.source_documents.get_by_id = AsyncMock(return_value=None)
    return mock_uow


@pytest.mark.asyncio
async def test_record_ignores_caller_derived_fields(record_uow, tenant_id):
    command = RecordObservationCommand(
        date=datetime(2025, 1, 31),
        organic_waste=6874.20,
        inorganic_waste=3745.18,
        recyclable_waste=569.05,
        total_waste=1.0,
        deviation=999.0,
    )

    result = await RecordObservationUseCase(record_uow).execute(tenant_id, command)

    assert result.is_ok()
    view = result.value
    assert view.total_waste == 11188.43
    assert view.deviation == 5.09
    stored = record_uow.waste_observations.create.call_args[0][1]
    assert stored.tenant_id == tenant_id
    record_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_record_normalizes_aware_dates_to_utc(record_uow, tenant_id):
    mexico_city = timezone(timedelta(hours=-6))
    command = RecordObservationCommand(
        date=datetime(2025, 9, 30, 20, 0, tzinfo=mexico_city), organic_waste=1.0
    )

    await RecordObservationUseCase(record_uow).execute(tenant_id, command)

    stored = record_uow.waste_observations.create.call_args[0][1]
    assert stored.date == datetime(2025, 10, 1, 2, 0)
    assert stored.date.tzinfo is None


@pytest.mark.asyncio
async def test_record_rejects_negative_quantity(record_uow, tenant_id):
    command = RecordObservationCommand(date=datetime(2025, 1, 1), organic_waste=-5.0)

    result = await RecordObservationUseCase(record_uow).execute(tenant_id, command)

    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.reason == "organic_waste"
    record_uow.waste_observations.create.assert_not_called()


@pytest.mark.asyncio
async def test_record_with_foreign_document_is_rejected(record_uow, tenant_id):
    command = RecordObservationCommand(
        date=datetime(2025, 1, 1), organic_waste=1.0, document_id=uuid4()
    )

    result = await RecordObservationUseCase(record_uow).execute(tenant_id, command)

    assert result.error.code == "DOCUMENT_NOT_FOUND"
    record_uow.source_documents.get_by_id.assert_called_once_with(tenant_id, command.document_id)


@pytest.mark.asyncio
async def test_update_other_tenants_observation_is_not_found(mock_uow, tenant_id):
    mock_uow.waste_observations.get_by_id = AsyncMock(return_value=None)
    mock_uow.waste_observations.update = AsyncMock()
    observation_id = uuid4()

    result = await UpdateObservationUseCase(mock_uow).execute(
        tenant_id, observation_id, UpdateObservationCommand(organic_waste=10.0)
    )

    assert result.error.code == "OBSERVATION_NOT_FOUND"
    mock_uow.waste_observations.get_by_id.assert_called_once_with(tenant_id, observation_id)
    mock_uow.waste_observations.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_recomputes_derived_fields(mock_uow, tenant_id):
    observation = WasteObservation(
        tenant_id=tenant_id,
        date=datetime(2025, 3, 1),
        organic_waste=40.0,
        inorganic_waste=60.0,
        recyclable_waste=0.0,
        total_waste=100.0,
        deviation=0.0,
    )
    mock_uow.waste_observations.get_by_id = AsyncMock(return_value=observation)
    mock_uow.waste_observations.update = AsyncMock(side_effect=lambda tenant_id, obs: obs)

    result = await UpdateObservationUseCase(mock_uow).execute(
        tenant_id, observation.id, UpdateObservationCommand(poda_waste=20.0, deviation=50.0)
    )

    assert result.is_ok()
    assert observation.total_waste == 120.0
    assert observation.deviation == 16.67
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_rejects_null_required_quantity(mock_uow, tenant_id):
    result = await UpdateObservationUseCase(mock_uow).execute(
        tenant_id, uuid4(), UpdateObservationCommand(organic_waste=None)
    )

    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_list_rejects_inverted_range(mock_uow, tenant_id):
    result = await ListObservationsUseCase(mock_uow).execute(
        tenant_id, datetime(2025, 2, 1), datetime(2025, 1, 1)
    )

    assert result.error.code == "VALIDATION_ERROR"
