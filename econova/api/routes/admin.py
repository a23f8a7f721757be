"""
Admin API Routes - Tenant Administration Endpoints

Provisioning, tenant configuration and batch jobs.
Authentication is via Admin API Key.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from pydantic import BaseModel

from econova.api.error import ClientError, ServerError
from econova.api.utils.admin_auth import verify_admin_api_key
from econova.app.services.unit_of_work import UnitOfWork
from econova.app.use_cases.admin import (
    AuditEventsResponse,
    GetAuditEventsUseCase,
    RecalculateDerivedFieldsUseCase,
    RecalculationResponse,
)
from econova.app.use_cases.reports import WindowRequest, build_window
from econova.app.use_cases.tenants import (
    FeatureFlagResponse,
    ProvisionTenantCommand,
    ProvisionTenantResponse,
    ProvisionTenantUseCase,
    SetFeatureFlagUseCase,
    SetTenantActiveResponse,
    SetTenantActiveUseCase,
    TenantProfile,
    UpdateTenantProfileCommand,
    UpdateTenantProfileUseCase,
    UpdateTenantSettingsResponse,
    UpdateTenantSettingsUseCase,
)
from econova.depends import get_unit_of_work
from econova.libs.result import Error

router = APIRouter(
    prefix="/admin", tags=["Admin"], dependencies=[Depends(verify_admin_api_key)]
)


class FeatureFlagRequest(BaseModel):
    enabled: bool


@router.post(
    "/tenants",
    status_code=status.HTTP_201_CREATED,
    response_model=ProvisionTenantResponse,
)
async def provision_tenant(
    command: ProvisionTenantCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Provision Tenant

    Creates the tenant, one flag row per catalog feature and the given
    setting overrides in a single transaction.

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_SLUG, INVALID_FEATURE, VALIDATION_ERROR
        - 401 Unauthorized: Missing or invalid admin API key
        - 409 Conflict: TENANT_ALREADY_EXISTS
        - 500 Internal Server Error: PROVISIONING_FAILED
    """
    result = await ProvisionTenantUseCase(uow).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code in ("INVALID_SLUG", "INVALID_FEATURE", "VALIDATION_ERROR"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.patch(
    "/tenants/{slug}", status_code=status.HTTP_200_OK, response_model=TenantProfile
)
async def update_tenant_profile(
    slug: str,
    command: UpdateTenantProfileCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Update display fields of a tenant. The slug itself cannot change."""
    result = await UpdateTenantProfileUseCase(uow).execute(slug, command)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


async def _set_active(slug: str, is_active: bool, uow: UnitOfWork):
    result = await SetTenantActiveUseCase(uow).execute(slug, is_active)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/tenants/{slug}/activate",
    status_code=status.HTTP_200_OK,
    response_model=SetTenantActiveResponse,
)
async def activate_tenant(slug: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    return await _set_active(slug, True, uow)


@router.post(
    "/tenants/{slug}/deactivate",
    status_code=status.HTTP_200_OK,
    response_model=SetTenantActiveResponse,
)
async def deactivate_tenant(slug: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Deactivated tenants no longer resolve; their data is kept."""
    return await _set_active(slug, False, uow)


@router.put(
    "/tenants/{slug}/settings",
    status_code=status.HTTP_200_OK,
    response_model=UpdateTenantSettingsResponse,
)
async def update_tenant_settings(
    slug: str,
    overrides: Dict[str, Any] = Body(...),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Upsert setting overrides. A null value removes the override so the
    system default applies again. Returns the effective settings.
    """
    result = await UpdateTenantSettingsUseCase(uow).execute(slug, overrides)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.put(
    "/tenants/{slug}/features/{feature}",
    status_code=status.HTTP_200_OK,
    response_model=FeatureFlagResponse,
)
async def set_feature_flag(
    slug: str,
    feature: str,
    request: FeatureFlagRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await SetFeatureFlagUseCase(uow).execute(slug, feature, request.enabled)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "INVALID_FEATURE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post(
    "/tenants/{slug}/recalculate",
    status_code=status.HTTP_200_OK,
    response_model=RecalculationResponse,
)
async def recalculate_derived_fields(
    slug: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    kind: Optional[str] = Query(None, description="Limit the job to a reporting window"),
    year: Optional[int] = Query(None),
    quarter: Optional[int] = Query(None),
    month: Optional[int] = Query(None),
):
    """
    Recalculate Derived Fields

    Recomputes stored total_waste and deviation for the tenant's
    observations, optionally within a reporting window. Rows that fail are
    listed in failed_ids and the job reports partial_failure. Deactivated
    tenants are included so their records can be migrated before reactivation.

    Raises:
        - 400 Bad Request: INVALID_WINDOW
        - 404 Not Found: TENANT_NOT_FOUND
    """
    window = None
    if kind is not None:
        if year is None:
            raise ClientError(
                Error("INVALID_WINDOW", "year is required when kind is given"),
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        window, error = build_window(
            WindowRequest(kind=kind, year=year, quarter=quarter, month=month)
        )
        if error is not None:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)

    result = await RecalculateDerivedFieldsUseCase(uow).execute(slug, window)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/tenants/{slug}/audit-events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsResponse,
)
async def get_audit_events(
    slug: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
    action: Optional[str] = Query(None, description="Only events with this action"),
):
    """
    Audit events of a tenant, newest first, with cursor pagination.

    Raises:
        - 404 Not Found: TENANT_NOT_FOUND
    """
    result = await GetAuditEventsUseCase(uow).execute(slug, limit, cursor, action)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
