from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from econova.domain.entities import Alert


class IAlertRepository(ABC):
    """Alert repository interface - application layer"""

    @abstractmethod
    async def list_by_tenant(
        self, tenant_id: UUID, resolved: Optional[bool] = None
    ) -> List[Alert]:
        """List a tenant's alerts newest first, optionally by resolved state"""
        pass

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID, alert_id: UUID) -> Optional[Alert]:
        """Get an alert; None when missing or owned by another tenant"""
        pass

    @abstractmethod
    async def create(self, alert: Alert) -> Alert:
        pass

    @abstractmethod
    async def update(self, alert: Alert) -> Alert:
        pass
