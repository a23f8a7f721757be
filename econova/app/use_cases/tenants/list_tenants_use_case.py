"""
Use Case: List Tenants

Feeds the tenant picker with every active tenant.
"""

from typing import List

from econova.app.services.unit_of_work import UnitOfWork
from econova.libs.result import Result, Return

from .dtos import TenantSummary
from .provision_tenant_use_case import dashboard_url


class ListTenantsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[TenantSummary]]:
        async with self.uow:
            tenants = await self.uow.tenants.list_active()
            return Return.ok(
                [
                    TenantSummary(
                        id=str(tenant.id),
                        slug=tenant.slug,
                        name=tenant.name,
                        description=tenant.description,
                        logo=tenant.logo,
                        dashboard_url=dashboard_url(tenant.slug),
                    )
                    for tenant in tenants
                ]
            )
