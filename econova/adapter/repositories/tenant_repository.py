from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from econova.app.repositories.tenant_repository import ITenantRepository
from econova.domain.entities import Tenant


class TenantRepository(ITenantRepository):
    """Tenant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID"""
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_slug(self, slug: str, active_only: bool = True) -> Optional[Tenant]:
        stmt = select(Tenant).where(Tenant.slug == slug)
        if active_only:
            stmt = stmt.where(Tenant.is_active == True)  # noqa: E712
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_active(self) -> List[Tenant]:
        stmt = (
            select(Tenant)
            .where(Tenant.is_active == True)  # noqa: E712
            .order_by(Tenant.name, Tenant.slug)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant
