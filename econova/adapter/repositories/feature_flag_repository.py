from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from econova.app.repositories.feature_flag_repository import IFeatureFlagRepository
from econova.domain.entities import FeatureFlag


class FeatureFlagRepository(IFeatureFlagRepository):
    """FeatureFlag repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_tenant_id(self, tenant_id: UUID) -> List[FeatureFlag]:
        stmt = (
            select(FeatureFlag)
            .where(FeatureFlag.tenant_id == tenant_id)
            .order_by(FeatureFlag.feature)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_feature(self, tenant_id: UUID, feature: str) -> Optional[FeatureFlag]:
        stmt = select(FeatureFlag).where(
            FeatureFlag.tenant_id == tenant_id, FeatureFlag.feature == feature
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, flag: FeatureFlag) -> FeatureFlag:
        self.session.add(flag)
        await self.session.flush()
        await self.session.refresh(flag)
        return flag

    async def update(self, flag: FeatureFlag) -> FeatureFlag:
        self.session.add(flag)
        await self.session.flush()
        await self.session.refresh(flag)
        return flag
