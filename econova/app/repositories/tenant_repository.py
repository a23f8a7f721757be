from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from econova.domain.entities import Tenant


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID"""
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str, active_only: bool = True) -> Optional[Tenant]:
        """Get tenant by slug; inactive tenants are only returned with active_only=False"""
        pass

    @abstractmethod
    async def list_active(self) -> List[Tenant]:
        """List active tenants ordered by name"""
        pass

    @abstractmethod
    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        pass

    @abstractmethod
    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        pass
