"""
Use Case: Resolve Tenant

Resolves a client-facing slug to the tenant row, its effective settings
(system defaults overlaid with the tenant's overrides) and the complete
feature-flag map.
"""

import logging
from typing import Any, Dict, Optional

from config import ApplicationConfig
from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.entities import Feature, Tenant
from econova.libs.result import Error, Result, Return

from .dtos import TenantInfo, TenantProfile

logger = logging.getLogger(__name__)


async def build_tenant_info(
    uow: UnitOfWork, tenant: Tenant, default_settings: Dict[str, Any]
) -> TenantInfo:
    """Assemble TenantInfo for an already loaded tenant (inside an open uow)."""
    settings = dict(default_settings)
    for row in await uow.tenant_settings.get_by_tenant_id(tenant.id):
        settings[row.key] = row.value

    rows = {row.feature: row.enabled for row in await uow.feature_flags.get_by_tenant_id(tenant.id)}
    features = {}
    for feature in Feature.catalog():
        if feature.value not in rows:
            logger.warning(
                f"Tenant {tenant.slug} has no flag row for {feature.value}; treating as disabled"
            )
        features[feature.value] = bool(rows.get(feature.value, False))

    return TenantInfo(
        tenant=TenantProfile.from_entity(tenant),
        settings=settings,
        features=features,
    )


class ResolveTenantUseCase:
    """
    Resolve a slug to TenantInfo.

    Business Rules:
    - Unknown slugs and deactivated tenants both yield TENANT_NOT_FOUND
    - Settings absent for the tenant fall back to system defaults
    - Every catalog feature is present in the result; a missing row is False
    """

    def __init__(self, uow: UnitOfWork, default_settings: Optional[Dict[str, Any]] = None):
        self.uow = uow
        self.default_settings = (
            default_settings
            if default_settings is not None
            else ApplicationConfig.DEFAULT_TENANT_SETTINGS
        )

    async def execute(self, slug: str) -> Result[TenantInfo]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            info = await build_tenant_info(self.uow, tenant, self.default_settings)
            return Return.ok(info)
