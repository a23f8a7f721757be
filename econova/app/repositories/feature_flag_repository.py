from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from econova.domain.entities import FeatureFlag


class IFeatureFlagRepository(ABC):
    """FeatureFlag repository interface - application layer"""

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: UUID) -> List[FeatureFlag]:
        """Get all feature flag rows of a tenant"""
        pass

    @abstractmethod
    async def get_by_feature(self, tenant_id: UUID, feature: str) -> Optional[FeatureFlag]:
        pass

    @abstractmethod
    async def create(self, flag: FeatureFlag) -> FeatureFlag:
        pass

    @abstractmethod
    async def update(self, flag: FeatureFlag) -> FeatureFlag:
        pass
