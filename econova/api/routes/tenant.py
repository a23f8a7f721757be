"""
Tenant API Routes

Public tenant picker and slug resolution.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from econova.api.error import ClientError, ServerError
from econova.app.services.unit_of_work import UnitOfWork
from econova.app.use_cases.tenants import (
    ListTenantsUseCase,
    ResolveTenantUseCase,
    TenantInfo,
    TenantSummary,
)
from econova.depends import get_unit_of_work

router = APIRouter(prefix="/tenants", tags=["Tenant"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TenantSummary])
async def list_tenants(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List active tenants ordered by name."""
    result = await ListTenantsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{slug}/info", status_code=status.HTTP_200_OK, response_model=TenantInfo)
async def get_tenant_info(slug: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Resolve Tenant

    Returns the tenant profile, effective settings (defaults overlaid with
    overrides) and the full feature map.

    Raises:
        - 404 Not Found: TENANT_NOT_FOUND (unknown or deactivated slug)
    """
    result = await ResolveTenantUseCase(uow).execute(slug)

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
