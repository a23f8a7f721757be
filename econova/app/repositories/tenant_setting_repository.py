from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from econova.domain.entities import TenantSetting


class ITenantSettingRepository(ABC):
    """TenantSetting repository interface - application layer"""

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: UUID) -> List[TenantSetting]:
        """Get all setting overrides of a tenant"""
        pass

    @abstractmethod
    async def get_by_key(self, tenant_id: UUID, key: str) -> Optional[TenantSetting]:
        """Get one setting override"""
        pass

    @abstractmethod
    async def create(self, setting: TenantSetting) -> TenantSetting:
        pass

    @abstractmethod
    async def update(self, setting: TenantSetting) -> TenantSetting:
        pass

    @abstractmethod
    async def delete(self, setting: TenantSetting) -> None:
        pass
