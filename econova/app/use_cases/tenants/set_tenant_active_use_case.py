"""
Use Case: Activate / Deactivate Tenant

Soft lifecycle toggle. Tenants are never hard-deleted; a deactivated
tenant no longer resolves but keeps all of its data.
"""

from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.base import utcnow
from econova.domain.entities import AuditEvent
from econova.libs.result import Error, Result, Return

from .dtos import SetTenantActiveResponse


class SetTenantActiveUseCase:
    """
    Business Logic:
    1. Load tenant by slug, including inactive tenants
    2. Set is_active
    3. Create audit event (tenant_activated / tenant_deactivated)

    Idempotent: setting the current state succeeds and is still audited
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, slug: str, is_active: bool) -> Result[SetTenantActiveResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(slug, active_only=False)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            previous = tenant.is_active
            tenant.is_active = is_active
            tenant.updated_at = utcnow()
            await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    action="tenant_activated" if is_active else "tenant_deactivated",
                    event_metadata={"previous_is_active": previous},
                )
            )

            await self.uow.commit()

            return Return.ok(SetTenantActiveResponse(slug=tenant.slug, is_active=is_active))
