"""
Use Case: Update Tenant Profile

Changes display fields of a tenant. The slug is immutable.
"""

from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.base import utcnow
from econova.domain.entities import AuditEvent
from econova.libs.result import Error, Result, Return

from .dtos import TenantProfile, UpdateTenantProfileCommand


class UpdateTenantProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, slug: str, command: UpdateTenantProfileCommand
    ) -> Result[TenantProfile]:
        changes = command.model_dump(exclude_unset=True)
        if "name" in changes and not (changes["name"] or "").strip():
            return Return.err(Error("VALIDATION_ERROR", "Tenant name cannot be empty"))

        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(slug, active_only=False)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            for field, value in changes.items():
                setattr(tenant, field, value)
            tenant.updated_at = utcnow()
            await self.uow.tenants.update(tenant)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    action="tenant_profile_updated",
                    event_metadata={"fields": sorted(changes)},
                )
            )

            await self.uow.commit()

            return Return.ok(TenantProfile.from_entity(tenant))
