"""
Load Tenant Context Use Case

Consumer-facing boundary: resolves a slug once and hands the resolved
tenant identity to presentation and reporting collaborators.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from uuid import UUID

from config import ApplicationConfig
from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.entities import Feature
from econova.libs.result import Error, Result, Return

from .dtos import TenantProfile
from .resolve_tenant_use_case import build_tenant_info


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant identity passed explicitly to every scoped operation"""

    tenant_id: UUID
    slug: str
    name: str
    profile: TenantProfile
    settings: Dict[str, Any] = field(default_factory=dict)
    features: Dict[str, bool] = field(default_factory=dict)

    def has_feature(self, feature: Feature) -> bool:
        return self.features.get(Feature(feature).value, False)


def require_feature(context: TenantContext, feature: Feature) -> Optional[Error]:
    """FEATURE_DISABLED error when the tenant does not have the module, else None."""
    if context.has_feature(feature):
        return None
    return Error(
        "FEATURE_DISABLED",
        f"Feature {Feature(feature).value} is not enabled for this tenant",
    )


class LoadTenantContextUseCase:
    """
    Use case for loading the tenant context from a slug.

    Business Rules:
    - TENANT_NOT_FOUND is returned before any waste data is touched
    - Result carries the numeric identity used to scope all later queries
    """

    def __init__(self, uow: UnitOfWork, default_settings: Optional[Dict[str, Any]] = None):
        self.uow = uow
        self.default_settings = (
            default_settings
            if default_settings is not None
            else ApplicationConfig.DEFAULT_TENANT_SETTINGS
        )

    async def execute(self, slug: str) -> Result[TenantContext]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(slug)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            info = await build_tenant_info(self.uow, tenant, self.default_settings)
            return Return.ok(
                TenantContext(
                    tenant_id=tenant.id,
                    slug=tenant.slug,
                    name=tenant.name,
                    profile=info.tenant,
                    settings=info.settings,
                    features=info.features,
                )
            )
