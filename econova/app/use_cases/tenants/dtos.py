"""
Tenant Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the tenant registry.
Provides type safety and clear contracts between layers.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Command DTOs
# ============================================================================


class ProvisionTenantCommand(BaseModel):
    """
    Provision tenant command - represents validated provisioning intent

    features=None means "use the configured default feature set";
    an empty list provisions every feature disabled.
    """

    slug: str
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    subdomain: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    features: Optional[List[str]] = None
    settings: Dict[str, Any] = Field(default_factory=dict)


class UpdateTenantProfileCommand(BaseModel):
    """Display fields an admin may change; the slug is immutable"""

    name: Optional[str] = None
    description: Optional[str] = None
    logo: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    subdomain: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class TenantProfile(BaseModel):
    """Tenant row as exposed to presentation collaborators"""

    id: str
    slug: str
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    subdomain: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    is_active: bool

    @classmethod
    def from_entity(cls, tenant) -> "TenantProfile":
        return cls(
            id=str(tenant.id),
            slug=tenant.slug,
            name=tenant.name,
            description=tenant.description,
            logo=tenant.logo,
            primary_color=tenant.primary_color,
            secondary_color=tenant.secondary_color,
            subdomain=tenant.subdomain,
            contact_email=tenant.contact_email,
            contact_phone=tenant.contact_phone,
            address=tenant.address,
            is_active=tenant.is_active,
        )


class TenantInfo(BaseModel):
    """Resolved tenant with effective settings and complete feature map"""

    tenant: TenantProfile
    settings: Dict[str, Any]
    features: Dict[str, bool]


class TenantSummary(BaseModel):
    """Tenant entry of the tenant picker"""

    id: str
    slug: str
    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    dashboard_url: str


class ProvisionTenantResponse(BaseModel):
    """Response for provision tenant use case"""

    id: str
    slug: str
    name: str
    dashboard_url: str
    features_enabled: List[str]


class SetTenantActiveResponse(BaseModel):
    slug: str
    is_active: bool


class UpdateTenantSettingsResponse(BaseModel):
    slug: str
    settings: Dict[str, Any]


class FeatureFlagResponse(BaseModel):
    slug: str
    feature: str
    enabled: bool
