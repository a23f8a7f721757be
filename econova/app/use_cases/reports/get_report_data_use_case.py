"""
Use Case: Get Report Data

Feeds the PDF report generator with a tenant-scoped, pre-computed
observation sequence and its window summary.
"""

from uuid import UUID

from econova.app.services.unit_of_work import UnitOfWork
from econova.app.use_cases.waste.dtos import ObservationView
from econova.domain.aggregation import summarize
from econova.libs.result import Result, Return

from .dtos import ReportData, WindowRequest, WindowSummaryView
from .window import build_window


class GetReportDataUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, tenant_name: str, request: WindowRequest
    ) -> Result[ReportData]:
        window, error = build_window(request)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            observations = await self.uow.waste_observations.list_by_tenant(
                tenant_id, window.start, window.end
            )

            return Return.ok(
                ReportData(
                    tenant_name=tenant_name,
                    period_label=window.label,
                    observations=[ObservationView.from_entity(o) for o in observations],
                    summary=WindowSummaryView.from_summary(summarize(observations, window)),
                )
            )
