"""
TenantSetting Entity

Per-tenant configuration override (timezone, currency, language, ...).
"""

from typing import Any, Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, Index, Relationship, SQLModel

if TYPE_CHECKING:
    from .tenant import Tenant


class TenantSetting(SQLModel, table=True):
    """
    TenantSetting entity - one override of a system-wide setting default.

    Business Rules:
    - (tenant_id, key) must be unique
    - Keys are open-ended; a missing key falls back to the system default
    """

    __tablename__ = "tenant_settings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    key: str = Field(max_length=100)
    value: Optional[Any] = Field(default=None, sa_column=Column(JSON))

    tenant: "Tenant" = Relationship(back_populates="settings")

    __table_args__ = (
        Index("idx_tenant_setting_key", "tenant_id", "key", unique=True),
    )
