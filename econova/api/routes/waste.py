"""
Waste Data API Routes

Tenant-scoped observation store. The tenant is resolved from the slug
before any query runs, and every route requires the module.waste feature.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from econova.api.error import ClientError, ServerError
from econova.app.services.unit_of_work import UnitOfWork
from econova.app.use_cases.tenants import TenantContext, require_feature
from econova.app.use_cases.waste import (
    ListObservationsUseCase,
    ObservationView,
    RecordObservationCommand,
    RecordObservationUseCase,
    UpdateObservationCommand,
    UpdateObservationUseCase,
)
from econova.depends import get_tenant_context, get_unit_of_work
from econova.domain.entities import Feature

router = APIRouter(prefix="/tenants/{slug}/waste-data", tags=["Waste Data"])


async def waste_context(context: TenantContext = Depends(get_tenant_context)) -> TenantContext:
    error = require_feature(context, Feature.waste)
    if error is not None:
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    return context


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ObservationView])
async def list_waste_data(
    context: TenantContext = Depends(waste_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    from_date: Optional[datetime] = Query(None, description="Inclusive lower bound"),
    to_date: Optional[datetime] = Query(None, description="Exclusive upper bound"),
):
    """
    List Observations

    Returns the tenant's observations ordered by date, optionally limited to
    [from_date, to_date).

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (from_date not before to_date)
        - 403 Forbidden: FEATURE_DISABLED
        - 404 Not Found: TENANT_NOT_FOUND
    """
    result = await ListObservationsUseCase(uow).execute(context.tenant_id, from_date, to_date)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ObservationView)
async def record_waste_data(
    command: RecordObservationCommand,
    context: TenantContext = Depends(waste_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record Observation

    total_waste and deviation in the payload are ignored and recomputed.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (negative or non-finite quantity)
        - 403 Forbidden: FEATURE_DISABLED
        - 404 Not Found: TENANT_NOT_FOUND, DOCUMENT_NOT_FOUND
    """
    result = await RecordObservationUseCase(uow).execute(context.tenant_id, command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "DOCUMENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.patch(
    "/{observation_id}", status_code=status.HTTP_200_OK, response_model=ObservationView
)
async def update_waste_data(
    observation_id: UUID,
    command: UpdateObservationCommand,
    context: TenantContext = Depends(waste_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Observation

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: FEATURE_DISABLED
        - 404 Not Found: TENANT_NOT_FOUND, OBSERVATION_NOT_FOUND (also for
          another tenant's observation)
    """
    result = await UpdateObservationUseCase(uow).execute(
        context.tenant_id, observation_id, command
    )

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "OBSERVATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
