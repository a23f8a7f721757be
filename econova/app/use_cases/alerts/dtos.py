"""
Alert Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, StrictBool


class SetAlertResolvedCommand(BaseModel):
    """Only a JSON boolean is accepted; "true" or 1 are rejected"""

    resolved: StrictBool


class AlertView(BaseModel):
    id: str
    tenant_id: str
    document_id: Optional[str] = None
    type: str
    message: str
    resolved: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, alert) -> "AlertView":
        return cls(
            id=str(alert.id),
            tenant_id=str(alert.tenant_id),
            document_id=str(alert.document_id) if alert.document_id else None,
            type=alert.type,
            message=alert.message,
            resolved=alert.resolved,
            created_at=alert.created_at,
            updated_at=alert.updated_at,
        )
