"""
Reports API Routes

Window summaries for dashboards and the report data feed.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from econova.api.error import ClientError, ServerError
from econova.app.services.unit_of_work import UnitOfWork
from econova.app.use_cases.reports import (
    GetReportDataUseCase,
    GetWindowSummaryUseCase,
    ReportData,
    WindowRequest,
    WindowSummaryView,
)
from econova.app.use_cases.tenants import TenantContext, require_feature
from econova.depends import get_tenant_context, get_unit_of_work
from econova.domain.entities import Feature

router = APIRouter(prefix="/tenants/{slug}", tags=["Reports"])


def window_request(
    kind: str = Query(..., description="month, quarter, calendar_year, true_year or true_quarter"),
    year: int = Query(...),
    quarter: Optional[int] = Query(None),
    month: Optional[int] = Query(None),
) -> WindowRequest:
    return WindowRequest(kind=kind, year=year, quarter=quarter, month=month)


def _raise_for(error):
    if error.code == "INVALID_WINDOW":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


def _check_waste_feature(context: TenantContext):
    error = require_feature(context, Feature.waste)
    if error is not None:
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)


@router.get("/summary", status_code=status.HTTP_200_OK, response_model=WindowSummaryView)
async def get_summary(
    request: WindowRequest = Depends(window_request),
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Window Summary

    Per-month and window totals with diversion rate and impact figures.
    Months without data inside a window that has data are zero-filled.

    Raises:
        - 400 Bad Request: INVALID_WINDOW
        - 403 Forbidden: FEATURE_DISABLED
        - 404 Not Found: TENANT_NOT_FOUND
    """
    _check_waste_feature(context)
    result = await GetWindowSummaryUseCase(uow).execute(context.tenant_id, request)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/report", status_code=status.HTTP_200_OK, response_model=ReportData)
async def get_report_data(
    request: WindowRequest = Depends(window_request),
    context: TenantContext = Depends(get_tenant_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Report Data

    Tenant-scoped observations and the window summary, ready for rendering.
    """
    _check_waste_feature(context)
    result = await GetReportDataUseCase(uow).execute(context.tenant_id, context.name, request)
    if result.is_err():
        _raise_for(result.error)
    return result.value
