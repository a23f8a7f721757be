"""
Use Case: List Alerts

Tenant-scoped, newest first, optionally only open or only resolved alerts.
"""

from typing import List, Optional
from uuid import UUID

from econova.app.services.unit_of_work import UnitOfWork
from econova.libs.result import Result, Return

from .dtos import AlertView


class ListAlertsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, resolved: Optional[bool] = None
    ) -> Result[List[AlertView]]:
        async with self.uow:
            alerts = await self.uow.alerts.list_by_tenant(tenant_id, resolved)
            return Return.ok([AlertView.from_entity(a) for a in alerts])
