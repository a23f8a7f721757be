"""
Get Audit Events Use Case

Retrieves administrative audit events for a tenant with pagination.
"""

from typing import Optional

from econova.app.services.unit_of_work import UnitOfWork
from econova.libs.result import Error, Result, Return

from .dtos import AuditEventsResponse, AuditEventView


class GetAuditEventsUseCase:
    """
    Business Rules:
    - Results are tenant-scoped (only events for the tenant)
    - Results ordered by newest first
    - Supports cursor-based pagination and filtering by action
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        slug: str,
        limit: int = 50,
        cursor: Optional[str] = None,
        action: Optional[str] = None,
    ) -> Result[AuditEventsResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(slug, active_only=False)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            events, next_cursor = await self.uow.audit_events.get_by_tenant_paginated(
                tenant.id, limit=limit, cursor=cursor, action=action
            )

            return Return.ok(
                AuditEventsResponse(
                    events=[
                        AuditEventView(
                            action=event.action,
                            timestamp=event.created_at.isoformat() + "Z",
                            metadata=event.event_metadata or {},
                        )
                        for event in events
                    ],
                    next_cursor=next_cursor,
                )
            )
