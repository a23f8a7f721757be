from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from econova.app.repositories.alert_repository import IAlertRepository
from econova.domain.entities import Alert


class AlertRepository(IAlertRepository):
    """Alert repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_tenant(
        self, tenant_id: UUID, resolved: Optional[bool] = None
    ) -> List[Alert]:
        stmt = select(Alert).where(Alert.tenant_id == tenant_id)
        if resolved is not None:
            stmt = stmt.where(Alert.resolved == resolved)
        stmt = stmt.order_by(Alert.created_at.desc(), Alert.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_id(self, tenant_id: UUID, alert_id: UUID) -> Optional[Alert]:
        stmt = select(Alert).where(Alert.id == alert_id, Alert.tenant_id == tenant_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, alert: Alert) -> Alert:
        self.session.add(alert)
        await self.session.flush()
        await self.session.refresh(alert)
        return alert

    async def update(self, alert: Alert) -> Alert:
        self.session.add(alert)
        await self.session.flush()
        await self.session.refresh(alert)
        return alert
