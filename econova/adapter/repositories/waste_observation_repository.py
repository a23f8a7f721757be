from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from econova.app.repositories.waste_observation_repository import (
    IWasteObservationRepository,
)
from econova.domain.entities import WasteObservation


class WasteObservationRepository(IWasteObservationRepository):
    """WasteObservation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _scoped(self, stmt, tenant_id: UUID, start, end):
        stmt = stmt.where(WasteObservation.tenant_id == tenant_id)
        if start is not None:
            stmt = stmt.where(WasteObservation.date >= start)
        if end is not None:
            stmt = stmt.where(WasteObservation.date < end)
        return stmt.order_by(WasteObservation.date, WasteObservation.id)

    async def create(self, tenant_id: UUID, observation: WasteObservation) -> WasteObservation:
        observation.tenant_id = tenant_id
        self.session.add(observation)
        await self.session.flush()
        await self.session.refresh(observation)
        return observation

    async def get_by_id(
        self, tenant_id: UUID, observation_id: UUID
    ) -> Optional[WasteObservation]:
        stmt = select(WasteObservation).where(
            WasteObservation.id == observation_id,
            WasteObservation.tenant_id == tenant_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_tenant(
        self,
        tenant_id: UUID,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[WasteObservation]:
        stmt = self._scoped(select(WasteObservation), tenant_id, start, end)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_ids_by_tenant(
        self,
        tenant_id: UUID,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[UUID]:
        stmt = self._scoped(select(WasteObservation.id), tenant_id, start, end)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update(self, tenant_id: UUID, observation: WasteObservation) -> WasteObservation:
        if observation.tenant_id != tenant_id:
            raise ValueError("Observation does not belong to the given tenant")
        self.session.add(observation)
        await self.session.flush()
        await self.session.refresh(observation)
        return observation
