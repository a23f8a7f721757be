"""
Alert API Routes
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from econova.api.error import ClientError, ServerError
from econova.app.services.unit_of_work import UnitOfWork
from econova.app.use_cases.alerts import (
    AlertView,
    ListAlertsUseCase,
    SetAlertResolvedCommand,
    SetAlertResolvedUseCase,
)
from econova.app.use_cases.tenants import TenantContext
from econova.depends import get_tenant_context, get_unit_of_work

router = APIRouter(prefix="/tenants/{slug}/alerts", tags=["Alerts"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[AlertView])
async def list_alerts(
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    resolved: Optional[bool] = Query(None, description="Only open (false) or resolved (true)"),
):
    result = await ListAlertsUseCase(uow).execute(context.tenant_id, resolved)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.patch("/{alert_id}", status_code=status.HTTP_200_OK, response_model=AlertView)
async def set_alert_resolved(
    alert_id: UUID,
    command: SetAlertResolvedCommand,
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Resolve or reopen an alert.

    Raises:
        - 404 Not Found: TENANT_NOT_FOUND, ALERT_NOT_FOUND (also for another
          tenant's alert)
        - 422 Unprocessable Entity: resolved is not a boolean
    """
    result = await SetAlertResolvedUseCase(uow).execute(
        context.tenant_id, alert_id, command.resolved
    )

    if result.is_err():
        error = result.error
        if error.code == "ALERT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
