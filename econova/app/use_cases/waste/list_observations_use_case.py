"""
Use Case: List Waste Observations

Tenant-scoped, date-ascending listing with an optional [from, to) range.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.base import to_naive_utc
from econova.libs.result import Error, Result, Return

from .dtos import ObservationView


class ListObservationsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> Result[List[ObservationView]]:
        start = to_naive_utc(from_date) if from_date else None
        end = to_naive_utc(to_date) if to_date else None
        if start is not None and end is not None and start >= end:
            return Return.err(
                Error("VALIDATION_ERROR", "from_date must be earlier than to_date")
            )

        async with self.uow:
            observations = await self.uow.waste_observations.list_by_tenant(
                tenant_id, start, end
            )
            return Return.ok([ObservationView.from_entity(o) for o in observations])
