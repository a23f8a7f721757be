from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from econova.app.repositories.tenant_setting_repository import ITenantSettingRepository
from econova.domain.entities import TenantSetting


class TenantSettingRepository(ITenantSettingRepository):
    """TenantSetting repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_tenant_id(self, tenant_id: UUID) -> List[TenantSetting]:
        stmt = (
            select(TenantSetting)
            .where(TenantSetting.tenant_id == tenant_id)
            .order_by(TenantSetting.key)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_key(self, tenant_id: UUID, key: str) -> Optional[TenantSetting]:
        stmt = select(TenantSetting).where(
            TenantSetting.tenant_id == tenant_id, TenantSetting.key == key
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, setting: TenantSetting) -> TenantSetting:
        self.session.add(setting)
        await self.session.flush()
        await self.session.refresh(setting)
        return setting

    async def update(self, setting: TenantSetting) -> TenantSetting:
        self.session.add(setting)
        await self.session.flush()
        await self.session.refresh(setting)
        return setting

    async def delete(self, setting: TenantSetting) -> None:
        await self.session.delete(setting)
        await self.session.flush()
