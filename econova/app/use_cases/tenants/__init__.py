"""Tenant registry and tenant context use cases."""

from .dtos import (
    FeatureFlagResponse,
    ProvisionTenantCommand,
    ProvisionTenantResponse,
    SetTenantActiveResponse,
    TenantInfo,
    TenantProfile,
    TenantSummary,
    UpdateTenantProfileCommand,
    UpdateTenantSettingsResponse,
)
from .list_tenants_use_case import ListTenantsUseCase
from .load_tenant_context_use_case import (
    LoadTenantContextUseCase,
    TenantContext,
    require_feature,
)
from .provision_tenant_use_case import ProvisionTenantUseCase, dashboard_url, is_valid_slug
from .resolve_tenant_use_case import ResolveTenantUseCase
from .set_feature_flag_use_case import SetFeatureFlagUseCase
from .set_tenant_active_use_case import SetTenantActiveUseCase
from .update_tenant_profile_use_case import UpdateTenantProfileUseCase
from .update_tenant_settings_use_case import UpdateTenantSettingsUseCase

__all__ = [
    "FeatureFlagResponse",
    "ListTenantsUseCase",
    "LoadTenantContextUseCase",
    "ProvisionTenantCommand",
    "ProvisionTenantResponse",
    "ProvisionTenantUseCase",
    "ResolveTenantUseCase",
    "SetFeatureFlagUseCase",
    "SetTenantActiveResponse",
    "SetTenantActiveUseCase",
    "TenantContext",
    "TenantInfo",
    "TenantProfile",
    "TenantSummary",
    "UpdateTenantProfileCommand",
    "UpdateTenantProfileUseCase",
    "UpdateTenantSettingsResponse",
    "UpdateTenantSettingsUseCase",
    "dashboard_url",
    "is_valid_slug",
    "require_feature",
]
