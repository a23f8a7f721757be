"""
FeatureFlag Entity

Explicit per-tenant toggle for one catalog feature.
"""

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Index, Relationship, SQLModel

if TYPE_CHECKING:
    from .tenant import Tenant


class FeatureFlag(SQLModel, table=True):
    """
    FeatureFlag entity - per-tenant module toggle.

    Business Rules:
    - Every tenant has one row per catalog feature
    - (tenant_id, feature) must be unique
    - Absence of a row is never read as enabled
    """

    __tablename__ = "feature_flags"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    feature: str = Field(max_length=100)  # Feature enum value
    enabled: bool = Field(default=False)

    tenant: "Tenant" = Relationship(back_populates="feature_flags")

    __table_args__ = (
        Index("idx_feature_flag_tenant_feature", "tenant_id", "feature", unique=True),
    )
