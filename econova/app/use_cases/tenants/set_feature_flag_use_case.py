"""
Use Case: Set Feature Flag

Enables or disables one catalog feature for a tenant.
"""

from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.entities import AuditEvent, Feature, FeatureFlag
from econova.libs.result import Error, Result, Return

from .dtos import FeatureFlagResponse


class SetFeatureFlagUseCase:
    """
    Business Rules:
    - Feature must belong to the catalog (INVALID_FEATURE otherwise)
    - The explicit row is updated; a missing row is created rather than
      leaving the flag implied by absence
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, slug: str, feature: str, enabled: bool) -> Result[FeatureFlagResponse]:
        try:
            feature = Feature.parse(feature)
        except ValueError:
            return Return.err(Error("INVALID_FEATURE", "Unknown feature identifier", reason=feature))

        async with self.uow:
            tenant = await self.uow.tenants.get_by_slug(slug, active_only=False)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            flag = await self.uow.feature_flags.get_by_feature(tenant.id, feature.value)
            previous = flag.enabled if flag is not None else None
            if flag is None:
                await self.uow.feature_flags.create(
                    FeatureFlag(tenant_id=tenant.id, feature=feature.value, enabled=enabled)
                )
            else:
                flag.enabled = enabled
                await self.uow.feature_flags.update(flag)

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant.id,
                    action="feature_flag_updated",
                    event_metadata={
                        "feature": feature.value,
                        "enabled": enabled,
                        "previous": previous,
                    },
                )
            )

            await self.uow.commit()

            return Return.ok(
                FeatureFlagResponse(slug=tenant.slug, feature=feature.value, enabled=enabled)
            )
