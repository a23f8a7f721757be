"""
Use Case: Provision Tenant

Creates a tenant together with its explicit feature-flag rows and its
setting overrides as one unit of work.
"""

import logging
import re
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from config import ApplicationConfig
from econova.app.services.unit_of_work import UnitOfWork
from econova.domain.entities import AuditEvent, Feature, FeatureFlag, Tenant, TenantSetting
from econova.libs.result import Error, Result, Return

from .dtos import ProvisionTenantCommand, ProvisionTenantResponse

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
SLUG_MAX_LENGTH = 100


def is_valid_slug(slug: str) -> bool:
    return len(slug) <= SLUG_MAX_LENGTH and bool(SLUG_PATTERN.match(slug))


def dashboard_url(slug: str) -> str:
    return ApplicationConfig.DASHBOARD_URL_TEMPLATE.format(slug=slug)


def already_exists(slug: str, tenant_id) -> Error:
    return Error(
        "TENANT_ALREADY_EXISTS",
        f"Tenant with slug '{slug}' already exists",
        reason=str(tenant_id),
    )


class ProvisionTenantUseCase:
    """
    Provision Tenant Use Case

    Business Logic:
    1. Validate slug format and feature identifiers
    2. Reject an existing slug with TENANT_ALREADY_EXISTS (nothing is mutated)
    3. Create the Tenant row
    4. Create one FeatureFlag row per catalog feature (requested ones enabled)
    5. Create one TenantSetting row per explicit override
    6. Create AuditEvent with action=tenant_provisioned
    7. Commit once; any failure rolls back and yields PROVISIONING_FAILED

    A concurrent provisioning of the same slug loses on the unique slug
    constraint and is reported as TENANT_ALREADY_EXISTS as well.
    """

    def __init__(self, uow: UnitOfWork, default_features: Optional[List[str]] = None):
        self.uow = uow
        self.default_features = (
            default_features
            if default_features is not None
            else ApplicationConfig.DEFAULT_TENANT_FEATURES
        )

    async def execute(self, command: ProvisionTenantCommand) -> Result[ProvisionTenantResponse]:
        if not is_valid_slug(command.slug):
            return Return.err(
                Error(
                    "INVALID_SLUG",
                    "Slug must be lowercase letters, digits and single hyphens",
                    reason=command.slug,
                )
            )

        if not command.name.strip():
            return Return.err(Error("VALIDATION_ERROR", "Tenant name is required"))

        requested = self.default_features if command.features is None else command.features
        try:
            enabled = {Feature.parse(feature) for feature in requested}
        except ValueError:
            unknown = sorted(f for f in requested if f not in {x.value for x in Feature})
            return Return.err(
                Error(
                    "INVALID_FEATURE",
                    "Unknown feature identifier",
                    reason=", ".join(unknown),
                )
            )

        async with self.uow:
            existing = await self.uow.tenants.get_by_slug(command.slug, active_only=False)
            if existing is not None:
                logger.info(f"Tenant {command.slug} already exists; provisioning skipped")
                return Return.err(already_exists(command.slug, existing.id))

            logger.info(f"Provisioning tenant {command.name} ({command.slug})")
            try:
                tenant = Tenant(
                    slug=command.slug,
                    name=command.name.strip(),
                    description=command.description,
                    logo=command.logo,
                    primary_color=command.primary_color or ApplicationConfig.DEFAULT_PRIMARY_COLOR,
                    secondary_color=command.secondary_color
                    or ApplicationConfig.DEFAULT_SECONDARY_COLOR,
                    subdomain=command.subdomain,
                    contact_email=command.contact_email,
                    contact_phone=command.contact_phone,
                    address=command.address,
                    is_active=True,
                )
                tenant = await self.uow.tenants.create(tenant)

                for feature in Feature.catalog():
                    await self.uow.feature_flags.create(
                        FeatureFlag(
                            tenant_id=tenant.id,
                            feature=feature.value,
                            enabled=feature in enabled,
                        )
                    )
                logger.info(f"Created {len(Feature.catalog())} feature flags for {tenant.slug}")

                for key, value in command.settings.items():
                    await self.uow.tenant_settings.create(
                        TenantSetting(tenant_id=tenant.id, key=key, value=value)
                    )
                logger.info(f"Applied {len(command.settings)} setting overrides for {tenant.slug}")

                features_enabled = [f.value for f in Feature.catalog() if f in enabled]
                await self.uow.audit_events.create(
                    AuditEvent(
                        tenant_id=tenant.id,
                        action="tenant_provisioned",
                        event_metadata={
                            "slug": tenant.slug,
                            "name": tenant.name,
                            "features": features_enabled,
                            "settings": sorted(command.settings),
                        },
                    )
                )

                await self.uow.commit()
            except Exception as exc:
                await self.uow.rollback()
                if isinstance(exc, IntegrityError):
                    existing = await self.uow.tenants.get_by_slug(
                        command.slug, active_only=False
                    )
                    if existing is not None:
                        logger.info(f"Tenant {command.slug} was provisioned concurrently")
                        return Return.err(already_exists(command.slug, existing.id))
                logger.error(f"Error provisioning tenant {command.slug}: {exc}")
                return Return.err(
                    Error(
                        "PROVISIONING_FAILED",
                        "Tenant provisioning failed; no changes were kept",
                        reason=str(exc),
                    )
                )

            logger.info(f"Provisioned tenant {tenant.name} (ID: {tenant.id})")
            return Return.ok(
                ProvisionTenantResponse(
                    id=str(tenant.id),
                    slug=tenant.slug,
                    name=tenant.name,
                    dashboard_url=dashboard_url(tenant.slug),
                    features_enabled=features_enabled,
                )
            )
