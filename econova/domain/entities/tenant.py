"""
Tenant Entity

Represents an isolated client organization.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utcnow

if TYPE_CHECKING:
    from .feature_flag import FeatureFlag
    from .tenant_setting import TenantSetting


class Tenant(SQLModel, table=True):
    """
    Tenant entity - isolated client organization.

    Business Rules:
    - slug is unique and never changes once published
    - id is the only key used to scope child records
    - Never hard-deleted: is_active=False soft-deactivates
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    slug: str = Field(max_length=100, unique=True, index=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    logo: Optional[str] = Field(default=None, max_length=255)
    primary_color: Optional[str] = Field(default=None, max_length=7)
    secondary_color: Optional[str] = Field(default=None, max_length=7)
    subdomain: Optional[str] = Field(default=None, max_length=100)
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None)

    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    settings: list["TenantSetting"] = Relationship(back_populates="tenant")
    feature_flags: list["FeatureFlag"] = Relationship(back_populates="tenant")

    __table_args__ = (Index("idx_tenant_is_active", "is_active"),)
