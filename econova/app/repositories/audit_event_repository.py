from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from econova.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """AuditEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Append an audit event; events are never updated"""
        pass

    @abstractmethod
    async def get_by_tenant_paginated(
        self,
        tenant_id: UUID,
        limit: int = 50,
        cursor: Optional[str] = None,
        action: Optional[str] = None,
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """Page of events, newest first, plus the cursor of the next page (None on the last)"""
        pass
