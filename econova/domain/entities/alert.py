"""
Alert Entity

Operator-facing notices attached to a tenant, e.g. a source document that
failed to process.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Alert(SQLModel, table=True):
    """
    Alert entity

    Business Rules:
    - tenant_id scopes every read and write
    - Alerts are never deleted; operators resolve or reopen them
    """

    __tablename__ = "alerts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False)
    document_id: Optional[UUID] = Field(
        default=None, foreign_key="source_documents.id", nullable=True
    )

    type: str = Field(max_length=20)  # AlertType value
    message: str = Field(max_length=1000)
    resolved: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_alert_tenant_resolved", "tenant_id", "resolved"),)
