"""
Use Case: Update Tenant Settings

Upserts setting overrides. A None value removes the override so the key
falls back to the system default again.
"""

from typing import Any, Dict, Optional

from config import ApplicationConfig
from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.entities import AuditEvent, TenantSetting
from econova.libs.result import Error, Result, Return

from .dtos import UpdateTenantSettingsResponse


class UpdateTenantSettingsUseCase:
    def __init__(self, uow: UnitOfWork, default_settings: Optional[Dict[str, Any]] = None):
        self.uow = uow
        self.default_settings = (
            default_settings
            if default_settings is not None
            else ApplicationConfig.DEFAULT_TENANT_SETTINGS
        )

    async def execute(
        self, slug: str, overrides: Dict[str, Any]
    ) -> Result[UpdateTenantSettingsResponse]:
        if any(not key or not key.strip() for key in overrides):
            return Return.err(Error("VALIDATION_ERROR", "Setting keys cannot be empty"))

        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(slug, active_only=False)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            for key, value in overrides.items():
                row = await self.uow.tenant_settings.get_by_key(tenant.id, key)
                if value is None:
                    if row is not None:
                        await self.uow.tenant_settings.delete(row)
                elif row is None:
                    await self.uow.tenant_settings.create(
                        TenantSetting(tenant_id=tenant.id, key=key, value=value)
                    )
                else:
                    row.value = value
                    await self.uow.tenant_settings.update(row)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    action="tenant_settings_updated",
                    event_metadata={
                        "set": sorted(k for k, v in overrides.items() if v is not None),
                        "reset": sorted(k for k, v in overrides.items() if v is None),
                    },
                )
            )

            settings = dict(self.default_settings)
            for row in await self.uow.tenant_settings.get_by_tenant_id(tenant.id):
                settings[row.key] = row.value

            await self.uow.commit()

            return Return.ok(UpdateTenantSettingsResponse(slug=tenant.slug, settings=settings))
