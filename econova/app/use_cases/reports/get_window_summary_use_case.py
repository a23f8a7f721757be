"""
Use Case: Get Window Summary

Per-month and window-level totals for one tenant over a reporting window.
"""

from uuid import UUID

from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.aggregation import summarize
from econova.libs.result import Result, Return

from .dtos import WindowRequest, WindowSummaryView
from .window import build_window


class GetWindowSummaryUseCase:
    """
    Business Rules:
    - Only observations of tenant_id inside [window.start, window.end) count
    - Window diversion rate comes from summed categories, not averaged rates
    - A tenant without data gets zeroed totals and no months, not an error
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, request: WindowRequest) -> Result[WindowSummaryView]:
        window, error = build_window(request)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            observations = await self.uow.waste_observations.list_by_tenant(
                tenant_id, window.start, window.end
            )
            return Return.ok(WindowSummaryView.from_summary(summarize(observations, window)))
